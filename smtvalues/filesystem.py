"""Unix-style file paths with simple lexical normalisation."""

from __future__ import annotations

import os
from functools import total_ordering
from typing import Union

__all__ = ["Filepath"]


@total_ordering
class Filepath:
    """An immutable Unix-style path; surrounding spaces are trimmed."""

    __slots__ = ("_raw",)

    def __init__(self, raw_path: Union[str, "Filepath"] = "") -> None:
        raw = raw_path.raw_path if isinstance(raw_path, Filepath) else raw_path
        trimmed = raw.strip(" ")
        self._raw = trimmed if trimmed else raw

    @property
    def raw_path(self) -> str:
        """The path as a string."""
        return self._raw

    def __str__(self) -> str:
        return self._raw

    def __fspath__(self) -> str:
        return self._raw

    def __repr__(self) -> str:
        return f"Filepath({self._raw!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Filepath):
            return NotImplemented
        return self._raw == other._raw

    def __lt__(self, other: "Filepath") -> bool:
        if not isinstance(other, Filepath):
            return NotImplemented
        return self._raw < other._raw

    def __hash__(self) -> int:
        return hash(self._raw)

    def is_absolute(self) -> bool:
        """Whether the path starts with ``/``."""
        return self._raw.startswith("/")

    def exists(self) -> bool:
        """Whether the path names an existing regular file."""
        return os.path.isfile(self._raw)

    def append(self, path: Union[str, "Filepath"]) -> "Filepath":
        """This path with ``path`` joined on textually, without normalising."""
        other = path.raw_path if isinstance(path, Filepath) else Filepath(path).raw_path
        return Filepath(self._raw + other)

    def canonical(self) -> "Filepath":
        """Drop repeated slashes, ``.`` segments and ``..`` after a segment.

        Leading ``..`` segments are kept; the final segment is kept as written.
        """
        if not self._raw:
            return self
        pieces = self._raw.split("/")
        is_absolute = False
        parent_prefix = 0
        segments: list[str] = []
        for index, piece in enumerate(pieces[:-1]):
            if index == 0 and piece == "":
                is_absolute = True
            elif piece in ("", "."):
                continue
            elif piece == "..":
                if segments:
                    segments.pop()
                else:
                    parent_prefix += 1
            else:
                segments.append(piece)
        segments.append(pieces[-1])
        prefix = ("/" if is_absolute else "") + "../" * parent_prefix
        return Filepath(prefix + "/".join(segments))

    def parent_path(self) -> "Filepath":
        """The path up to and including its last ``/``; empty if there is none."""
        last = self._raw.rfind("/")
        if last < 0:
            return Filepath("")
        return Filepath(self._raw[: last + 1])