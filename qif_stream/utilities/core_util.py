#!/usr/bin/env python3
"""
Core Utilities

Features:
- File I/O helpers
- String utilities
"""

from __future__ import annotations

from pathlib import Path
from typing import IO, Any, Literal, Optional, cast, overload

# region Common functions


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


@overload
def open_for_read(path: Path, binary: Literal[True], **kwargs: Any) -> IO[bytes]: ...
@overload
def open_for_read(path: Path, binary: Literal[False] = False, **kwargs: Any) -> IO[str]: ...


def open_for_read(path: Path, binary: bool = False, **kwargs: Any) -> IO[Any]:
    mode = "rb" if binary else "r"
    return open(path, mode, **kwargs)


def open_for_write(
    path: Path,
    *,
    ensure_parent: bool = True,
    newline: str | None = "\n",
    encoding: str | None = "utf-8",
    **kwargs: Any,
) -> IO[str]:
    """Open ``path`` for text writing, creating parent directories first."""
    if ensure_parent:
        Path(path).parent.mkdir(parents=True, exist_ok=True)
    return cast(IO[str], open(path, "w", newline=newline, encoding=encoding, **kwargs))


# endregion Common functions
