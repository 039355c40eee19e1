# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
"""Membership tests over sorted, compact code point interval tables."""

from typing import Sequence, Tuple

Codepoint = int
Interval = Tuple[Codepoint, Codepoint]
Table = Sequence[Interval]

MAX_CODEPOINT = 0x10FFFF


def in_table(r: Codepoint, table: Table) -> bool:
    """Return True if ``r`` falls inside one of the ``(first, last)`` ranges.

    ``table`` must be sorted by ``first`` with no adjacent or overlapping
    entries. That is a property of the generated data and is not checked
    here.
    """
    lo = 0
    hi = len(table) - 1
    if hi < 0 or r < table[0][0] or r > table[hi][1]:
        return False
    while lo <= hi:
        mid = (lo + hi) // 2
        first, last = table[mid]
        if r < first:
            hi = mid - 1
        elif r > last:
            lo = mid + 1
        else:
            return True
    return False


def in_tables(r: Codepoint, *tables: Table) -> bool:
    for t in tables:
        if in_table(r, t):
            return True
    return False
