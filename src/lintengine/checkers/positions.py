# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate match offsets into 1-based line and column positions."""

from __future__ import annotations

from bisect import bisect_right


class LineIndex:
    """Precomputed newline offsets of a text buffer."""

    __slots__ = ("_length", "_line_starts")

    def __init__(self, text: str) -> None:
        starts = [0]
        position = text.find("\n")
        while position != -1:
            starts.append(position + 1)
            position = text.find("\n", position + 1)
        self._line_starts = starts
        self._length = len(text)

    def locate(self, offset: int) -> tuple[int, int]:
        """Return the ``(line, column)`` of ``offset``, both 1-based.

        Args:
            offset: Zero-based offset into the indexed text.

        Returns:
            tuple[int, int]: Line and column of the character at ``offset``.

        Raises:
            ValueError: If ``offset`` lies outside the text.
        """

        if offset < 0 or offset > self._length:
            raise ValueError(f"offset {offset} outside text of length {self._length}")
        line_index = bisect_right(self._line_starts, offset) - 1
        return line_index + 1, offset - self._line_starts[line_index] + 1


__all__ = ["LineIndex"]
