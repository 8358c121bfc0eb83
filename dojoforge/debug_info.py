"""Mapping of Sierra statements to Cairo source locations."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass
class TextPosition:
    """A 0-based line and column inside a file."""

    line: int
    col: int

    def _to_dict(self) -> dict[str, int]:
        return {"line": self.line, "col": self.col}


@dataclass
class Location:
    """A span of a source file, with a path relative to the working directory."""

    start: TextPosition
    end: TextPosition
    file_path: str

    def _to_dict(self) -> dict[str, Any]:
        return {
            "start": self.start._to_dict(),
            "end": self.end._to_dict(),
            "file_path": self.file_path,
        }


@dataclass
class SierraStatementToCairoDebugInfo:
    """The Cairo locations a Sierra statement comes from."""

    cairo_locations: list[Location] = field(default_factory=list)


@dataclass
class SierraToCairoDebugInfo:
    """Debug info for a whole Sierra program, keyed by statement index."""

    sierra_statements_to_cairo_info: dict[int, SierraStatementToCairoDebugInfo] = field(
        default_factory=dict
    )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation; statement indexes become strings."""
        return {
            "sierra_statements_to_cairo_info": {
                str(index): {
                    "cairo_locations": [loc._to_dict() for loc in info.cairo_locations]
                }
                for index, info in self.sierra_statements_to_cairo_info.items()
            }
        }


def relative_location(
    file_path: str | os.PathLike[str] | None,
    start: TextPosition | None,
    end: TextPosition | None,
    current_dir: str | os.PathLike[str] | None = None,
) -> Location | None:
    """Build a location relative to the working directory.

    Returns None for virtual files (no path), files outside the working
    directory, or when either position is unknown.
    """
    if file_path is None:
        return None
    base = Path(current_dir) if current_dir is not None else Path.cwd()
    try:
        relative = Path(file_path).relative_to(base)
    except ValueError:
        return None
    if start is None or end is None:
        return None
    return Location(start=start, end=end, file_path=str(relative))