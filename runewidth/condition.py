# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
"""Width resolution policy and its optional dense lookup cache.

A :class:`Condition` answers "how many terminal cells does this code point
occupy" for one combination of the East Asian Width and emoji neutrality
settings. Answers come from the interval tables in :mod:`runewidth.table`,
consulted in a fixed priority order, or from a per-instance look-up table
once :meth:`Condition.build_lut` has been called.

Nothing here takes a lock. A Condition is safe to share between threads
once its LUT (if any) has been built; building the LUT while other threads
are reading from the same Condition is the caller's problem.
"""

import logging

from . import table
from .interval import MAX_CODEPOINT, Codepoint, in_table, in_tables

_logger = logging.getLogger(__name__)

Rune = int | str


def _codepoint(r: Rune) -> Codepoint:
    if isinstance(r, str):
        return ord(r)
    return r


def is_ambiguous_width(r: Rune) -> bool:
    """Return True if ``r`` has East Asian Width "A" (private use included)."""
    return in_tables(_codepoint(r), table.PRIVATE, table.AMBIGUOUS)


def is_neutral_width(r: Rune) -> bool:
    """Return True if ``r`` has East Asian Width "N"."""
    return in_table(_codepoint(r), table.NEUTRAL)


class Condition:
    """A width policy: two flags and, optionally, a precomputed LUT.

    :param bool east_asian_width: Treat ambiguous-width characters as two
        cells wide, as legacy CJK terminals do.
    :param bool strict_emoji_neutral: Keep emoji that Unicode classifies as
        neutral or ambiguous at their East Asian width. When disabled and
        ``east_asian_width`` is set, such emoji occupy two cells.

    The flags cannot be changed after construction; use :meth:`replace` to
    get a Condition with different flags. The LUT belongs to the instance
    and is never carried over to a replacement.
    """

    __slots__ = ("_east_asian_width", "_strict_emoji_neutral", "_lut")

    def __init__(self, east_asian_width: bool = False, strict_emoji_neutral: bool = True):
        self._east_asian_width = bool(east_asian_width)
        self._strict_emoji_neutral = bool(strict_emoji_neutral)
        self._lut: bytes | None = None

    @property
    def east_asian_width(self) -> bool:
        return self._east_asian_width

    @property
    def strict_emoji_neutral(self) -> bool:
        return self._strict_emoji_neutral

    @property
    def has_lut(self) -> bool:
        return self._lut is not None

    def replace(
        self,
        *,
        east_asian_width: bool | None = None,
        strict_emoji_neutral: bool | None = None,
    ) -> "Condition":
        if east_asian_width is None:
            east_asian_width = self._east_asian_width
        if strict_emoji_neutral is None:
            strict_emoji_neutral = self._strict_emoji_neutral
        return Condition(east_asian_width, strict_emoji_neutral)

    def __eq__(self, other):
        if not isinstance(other, Condition):
            return NotImplemented
        return (self._east_asian_width, self._strict_emoji_neutral) == (
            other._east_asian_width,
            other._strict_emoji_neutral,
        )

    def __hash__(self):
        return hash((self._east_asian_width, self._strict_emoji_neutral))

    def __repr__(self):
        return (
            f"Condition(east_asian_width={self._east_asian_width}, "
            f"strict_emoji_neutral={self._strict_emoji_neutral})"
        )

    def rune_width(self, r: Rune) -> int:
        """Return the number of cells (0, 1 or 2) ``r`` occupies.

        ``r`` is an integer code point or a one-character string. Integers
        outside ``0..0x10FFFF`` have width 0.
        """
        cp = _codepoint(r)
        if cp < 0 or cp > MAX_CODEPOINT:
            return 0
        if self._lut is not None:
            return self._lut[cp]
        return self._table_width(cp)

    width = rune_width

    def _table_width(self, r: Codepoint) -> int:
        if r < 0x20 or 0x7F <= r <= 0x9F:
            return 0
        if in_tables(r, table.NONPRINT, table.COMBINING):
            return 0
        if in_table(r, table.DOUBLEWIDTH):
            return 2
        if in_table(r, table.AMBIGUOUS):
            return 2 if self._east_asian_width else 1
        if self._east_asian_width and not self._strict_emoji_neutral and in_table(r, table.EMOJI):
            return 2
        if in_table(r, table.NARROW):
            return 1
        if not self._east_asian_width and in_table(r, table.NEUTRAL):
            return 1
        return 1

    def build_lut(self) -> None:
        """Precompute the width of every code point.

        Costs one byte per code point (about 1.1 MB). Calling it again on a
        Condition that already has a LUT does nothing.
        """
        if self._lut is not None:
            return
        _logger.debug("building width LUT for %r", self)
        self._lut = bytes(map(self._table_width, range(MAX_CODEPOINT + 1)))

    def string_width(self, s: str) -> int:
        """Return the sum of the widths of the code points in ``s``."""
        return sum(map(self.rune_width, s))

    def truncate(self, s: str, w: int, tail: str = "") -> str:
        """Cut ``s`` so that it, followed by ``tail``, fits in ``w`` cells.

        ``s`` is returned unchanged (without ``tail``) when it already fits.
        """
        if self.string_width(s) <= w:
            return s
        w -= self.string_width(tail)
        width = 0
        pos = len(s)
        for i, ch in enumerate(s):
            cw = self.rune_width(ch)
            if width + cw > w:
                pos = i
                break
            width += cw
        return s[:pos] + tail

    def truncate_left(self, s: str, w: int, prefix: str = "") -> str:
        """Drop the first ``w`` cells of ``s`` and put ``prefix`` in front.

        A wide character cut in half is replaced by spaces for the cells that
        are kept.
        """
        if self.string_width(s) <= w:
            return prefix
        width = 0
        pos = len(s)
        for i, ch in enumerate(s):
            cw = self.rune_width(ch)
            if width + cw > w:
                if width < w:
                    pos = i + 1
                    prefix += " " * (width + cw - w)
                else:
                    pos = i
                break
            width += cw
        return prefix + s[pos:]

    def wrap(self, s: str, w: int) -> str:
        """Insert newlines so that no line of ``s`` is wider than ``w`` cells."""
        out: list[str] = []
        width = 0
        for ch in s:
            cw = self.rune_width(ch)
            if ch == "\n":
                width = 0
            elif width + cw > w:
                out.append("\n")
                width = cw
            else:
                width += cw
            out.append(ch)
        return "".join(out)

    def fill_left(self, s: str, w: int) -> str:
        count = w - self.string_width(s)
        if count > 0:
            return " " * count + s
        return s

    def fill_right(self, s: str, w: int) -> str:
        count = w - self.string_width(s)
        if count > 0:
            return s + " " * count
        return s
