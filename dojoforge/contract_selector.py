"""Selection of contracts by qualified path, with a trailing wildcard."""

from __future__ import annotations

import re
from dataclasses import dataclass

from dojoforge.constants import CAIRO_PATH_SEPARATOR

GLOB_PATH_SELECTOR = "*"

_DELIMITERS = re.compile(r"[_\- ]+")


def _is_boundary(prev: str, ch: str, nxt: str) -> bool:
    return (
        (prev.islower() and ch.isupper())
        or (prev.islower() and ch.isdigit())
        or (prev.isupper() and ch.isdigit())
        or (prev.isdigit() and (ch.isupper() or ch.islower()))
        or (prev.isupper() and ch.isupper() and nxt.islower())
    )


def _split_segment(segment: str) -> list[str]:
    words: list[str] = []
    current = ""
    for ch, nxt in zip(segment, segment[1:] + " "):
        if current and _is_boundary(current[-1], ch, nxt):
            words.append(current)
            current = ""
        current += ch
    if current:
        words.append(current)
    return words


def to_snake_case(text: str) -> str:
    """Convert text to snake case, splitting words on case and digit changes."""
    words = [
        word.lower()
        for segment in _DELIMITERS.split(text)
        if segment
        for word in _split_segment(segment)
    ]
    return "_".join(words)


@dataclass(frozen=True)
class ContractSelector:
    """A qualified contract path, optionally ending with a wildcard."""

    path: str

    def __str__(self) -> str:
        return self.path

    def package(self) -> str:
        """Return the package name, the first segment of the path."""
        return self.path.partition(CAIRO_PATH_SEPARATOR)[0]

    def path_with_model_snake_case(self) -> str:
        """Return the path with only its last segment converted to snake case."""
        path, sep, last_segment = self.path.rpartition(CAIRO_PATH_SEPARATOR)
        if not sep:
            path, last_segment = "", self.path
        return f"{path}{CAIRO_PATH_SEPARATOR}{to_snake_case(last_segment)}"

    def is_wildcard(self) -> bool:
        """Return True if the selector ends with a wildcard."""
        return self.path.endswith(GLOB_PATH_SELECTOR)

    def partial_path(self) -> str:
        """Return the path up to the first wildcard."""
        return self.path.partition(GLOB_PATH_SELECTOR)[0]

    def full_path(self) -> str:
        """Return the whole selector path."""
        return self.path

    def matches(self, contract_path: str) -> bool:
        """Return True if the contract path is selected by this selector."""
        if self.is_wildcard():
            return contract_path.startswith(self.partial_path())
        return contract_path == self.path_with_model_snake_case()

    def validate(self) -> None:
        """Raise ValueError if the selector has more than one wildcard."""
        if self.path.count(GLOB_PATH_SELECTOR) > 1:
            raise ValueError(
                f"Contract path `{self.path}` has multiple wildcard selectors, "
                "only one '*' selector is allowed."
            )