# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.

import hashlib

import pytest

from runewidth import table
from runewidth.interval import MAX_CODEPOINT, in_table, in_tables

from conftest import TABLES

# name: (number of code points, SHA-256 of the membership byte array)
CHECKSUMS = {
    "private": (137468, "a4a641206dc8c5de80bd9f03515a54a706a5a4904c7684dc6a33d65c967a51b2"),
    "nonprint": (2331, "4d50eb79fcea61839d9e08f9a6e926d48ccf6d5d1a03880818e17000149b7297"),
    "combining": (2195, "9228df8d8a55bd111c10d567f155e3ccedc1fb6631614316d9f6287c391f3550"),
    "doublewidth": (182494, "28d3d696c4c3e4567c43a2271dc8bcd9606bfd5d97b0ddf00f5a1e869fc48ab7"),
    "ambiguous": (138739, "d05e339a10f296de6547ff3d6c5aee32f627f6555477afebd4a3b7e3cf74c9e3"),
    "narrow": (111, "fa897699c5e3cd9141c638d539331b0bdd508b874e22996c5e929767d455fc5a"),
    "neutral": (28108, "7b2e3966db2d39123d80fb90e3d7434042516ef0ba996cf877587d84579a5af5"),
    "emoji": (3535, "9ec17351601d49c535658de8d129c1d0ccda2e620669fc39a2faaee7dedcef6d"),
}


def painted(tbl):
    buf = bytearray(MAX_CODEPOINT + 1)
    for first, last in tbl:
        buf[first : last + 1] = b"\x01" * (last - first + 1)
    return bytes(buf)


def test_unicode_version():
    assert table.UNICODE_VERSION == (14, 0, 0)


@pytest.mark.parametrize("name", sorted(TABLES))
def test_well_formed(name):
    tbl = TABLES[name]
    assert len(tbl) > 0
    for i, (first, last) in enumerate(tbl):
        assert 0 <= first <= last <= MAX_CODEPOINT, f"{name}[{i}] = {(first, last)}"
        if i + 1 < len(tbl):
            nxt = tbl[i + 1]
            assert last + 1 < nxt[0], f"{name}[{i}] {(first, last)} not compact with {nxt}"


@pytest.mark.parametrize("name", sorted(TABLES))
def test_checksum(name):
    tbl = TABLES[name]
    buf = bytes(in_table(r, tbl) for r in range(MAX_CODEPOINT + 1))
    want_n, want_sha = CHECKSUMS[name]
    assert sum(buf) == want_n
    assert hashlib.sha256(buf).hexdigest() == want_sha
    assert buf == painted(tbl)


def test_in_table_bounds():
    tbl = ((0x10, 0x1F), (0x30, 0x30), (0x40, 0x4F))
    assert not in_table(0x0F, tbl)
    assert in_table(0x10, tbl)
    assert in_table(0x1F, tbl)
    assert not in_table(0x20, tbl)
    assert in_table(0x30, tbl)
    assert not in_table(0x31, tbl)
    assert in_table(0x4F, tbl)
    assert not in_table(0x50, tbl)
    assert not in_table(-1, tbl)
    assert not in_table(0x10, ())


def test_in_tables():
    assert in_tables(0x0300, table.NONPRINT, table.COMBINING)
    assert in_tables(0x0000, table.NONPRINT, table.COMBINING)
    assert not in_tables(ord("a"), table.NONPRINT, table.COMBINING)
    assert not in_tables(ord("a"))


def test_private_use_is_ambiguous():
    for first, last in table.PRIVATE:
        assert in_table(first, table.AMBIGUOUS)
        assert in_table(last, table.AMBIGUOUS)
