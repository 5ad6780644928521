"""CLI utilities."""

from pathlib import Path


def find_workspace_root(start_path: Path | None = None) -> Path:
    """Find the workspace root for a path.

    Walks up the directory tree looking for a .git directory. Falls back to
    the current working directory when the path is not inside a repository.

    Args:
        start_path: File or directory to search from (default: cwd)

    Returns:
        Path to workspace root
    """
    cwd = Path.cwd().resolve()
    if start_path is None:
        start_path = cwd

    current = start_path.resolve()
    if current.is_file():
        current = current.parent

    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return cwd
