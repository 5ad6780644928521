"""Host module - editor/terminal capabilities used by navigation."""

from ngjump.host.base import Choice, Host
from ngjump.host.workspace import WorkspaceHost

__all__ = ["Choice", "Host", "WorkspaceHost"]
