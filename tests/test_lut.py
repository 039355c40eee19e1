# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.

import pytest

import runewidth
from runewidth import Condition
from runewidth.interval import MAX_CODEPOINT

from conftest import WIDTH_SHA_EA_NO, WIDTH_SHA_EA_YES, WIDTH_SHA_EA_YES_NON_STRICT


@pytest.mark.parametrize(
    "east_asian_width, strict_emoji_neutral, want",
    [
        (False, True, WIDTH_SHA_EA_NO),
        (True, True, WIDTH_SHA_EA_YES),
        (True, False, WIDTH_SHA_EA_YES_NON_STRICT),
    ],
)
def test_lut_checksums(width_sha, east_asian_width, strict_emoji_neutral, want):
    c = Condition(east_asian_width, strict_emoji_neutral)
    c.build_lut()
    assert c.has_lut
    assert width_sha(c) == want


def test_lut_does_not_change_results():
    c = Condition(east_asian_width=True)
    sample = list(range(0, MAX_CODEPOINT + 1, 127)) + [ord(ch) for ch in "世☆☺👁a\x00"]
    before = [c.rune_width(r) for r in sample]
    c.build_lut()
    assert [c.rune_width(r) for r in sample] == before


def test_lut_out_of_range():
    c = Condition()
    c.build_lut()
    assert c.rune_width(-1) == 0
    assert c.rune_width(MAX_CODEPOINT + 1) == 0
    assert c.rune_width(MAX_CODEPOINT) == 0


def test_build_lut_is_one_shot():
    c = Condition()
    c.build_lut()
    lut = c._lut
    c.build_lut()
    assert c._lut is lut
    assert len(lut) == MAX_CODEPOINT + 1


def test_default_lut(monkeypatch, width_sha):
    runewidth.build_lut()
    assert runewidth.default_condition().has_lut

    for value, want in (("1", WIDTH_SHA_EA_YES), ("0", WIDTH_SHA_EA_NO)):
        monkeypatch.setenv("RUNEWIDTH_EASTASIAN", value)
        c = runewidth.apply_env()
        assert c is runewidth.default_condition()
        assert c.has_lut
        assert width_sha(c) == want
