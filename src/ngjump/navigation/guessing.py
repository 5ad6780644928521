"""Filename guessing from naming conventions.

AngularJS code bases rarely import anything, so the only link between
``FooService.bar()`` and the file defining it is naming convention:
``FooService.js``, ``fooService.js``, ``foo-service.js``, ``foo/index.js``...
"""

from __future__ import annotations

import re

RECOGNIZED_SUFFIXES: tuple[str, ...] = ("Service", "Factory", "Controller")

# fooBar -> foo-Bar, HTTPServer -> HTTP-Server
_KEBAB_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def to_lower_camel(name: str) -> str:
    return name[:1].lower() + name[1:]


def to_kebab(name: str) -> str:
    return _KEBAB_BOUNDARY.sub("-", name).lower()


def strip_suffix(name: str) -> str | None:
    """Return ``name`` without one recognized suffix, or None."""
    for suffix in RECOGNIZED_SUFFIXES:
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return None


def _name_variants(name: str) -> list[str]:
    return [name, to_lower_camel(name), to_kebab(name)]


def guess_file_patterns(owner_name: str) -> list[str]:
    """Return ordered, duplicate-free filename patterns for ``owner_name``.

    Example:
        >>> guess_file_patterns("Foo")[:3]
        ['Foo.js', 'Foo.ts', 'Foo/index.js']
    """
    if not owner_name:
        return []

    names = _name_variants(owner_name)
    base = strip_suffix(owner_name)
    if base:
        names += _name_variants(base)

    patterns: list[str] = []
    for name in names:
        patterns += [f"{name}.js", f"{name}.ts", f"{name}/index.js"]
    return list(dict.fromkeys(patterns))
