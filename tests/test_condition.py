# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.

import pytest

from runewidth import Condition, is_ambiguous_width, is_neutral_width
from runewidth.interval import MAX_CODEPOINT

from conftest import WIDTH_SHA_EA_NO, WIDTH_SHA_EA_YES, WIDTH_SHA_EA_YES_NON_STRICT

# (rune, width, width with east asian width, same with strict_emoji_neutral off)
RUNE_WIDTHS = [
    ("世", 2, 2, 2),
    ("界", 2, 2, 2),
    ("ｾ", 1, 1, 1),
    ("ｶ", 1, 1, 1),
    ("ｲ", 1, 1, 1),
    ("☆", 1, 2, 2),  # ambiguous
    ("☺", 1, 1, 2),
    ("☻", 1, 1, 2),
    ("♥", 1, 2, 2),
    ("♦", 1, 1, 2),
    ("♣", 1, 2, 2),
    ("♠", 1, 2, 2),
    ("♂", 1, 2, 2),
    ("♀", 1, 2, 2),
    ("♪", 1, 2, 2),
    ("♫", 1, 1, 2),
    ("☼", 1, 1, 2),
    ("↕", 1, 2, 2),
    ("‼", 1, 1, 2),
    ("↔", 1, 2, 2),
    ("\x00", 0, 0, 0),
    ("\x01", 0, 0, 0),
    ("\u0300", 0, 0, 0),
    ("\u2028", 0, 0, 0),
    ("\u2029", 0, 0, 0),
    ("a", 1, 1, 1),  # narrow ASCII
    ("⟦", 1, 1, 1),  # narrow, not ASCII
    ("👁", 1, 1, 2),
]


@pytest.mark.parametrize("r, out, eaout, nseout", RUNE_WIDTHS)
def test_rune_width(r, out, eaout, nseout):
    assert Condition().rune_width(r) == out
    assert Condition(east_asian_width=True).rune_width(r) == eaout
    c = Condition(east_asian_width=True, strict_emoji_neutral=False)
    assert c.rune_width(r) == nseout
    assert c.rune_width(ord(r)) == nseout


def test_defaults():
    c = Condition()
    assert c.east_asian_width is False
    assert c.strict_emoji_neutral is True
    assert c.has_lut is False


def test_flags_are_read_only():
    c = Condition()
    with pytest.raises(AttributeError):
        c.east_asian_width = True


def test_replace():
    c = Condition()
    c.build_lut()
    ea = c.replace(east_asian_width=True)
    assert ea == Condition(True, True)
    assert ea.has_lut is False
    assert c.east_asian_width is False
    assert ea.replace(strict_emoji_neutral=False) == Condition(True, False)
    assert c.replace() == c


def test_equality_and_hash():
    assert Condition() == Condition(False, True)
    assert Condition() != Condition(True, True)
    assert hash(Condition(True, False)) == hash(Condition(True, False))
    assert Condition() != (False, True)
    assert repr(Condition()) == "Condition(east_asian_width=False, strict_emoji_neutral=True)"


def test_width_alias():
    c = Condition(east_asian_width=True)
    assert c.width("☆") == c.rune_width("☆") == 2


@pytest.mark.parametrize("r", [-1, -0x110000, MAX_CODEPOINT + 1, 0x7FFFFFFF])
def test_out_of_range(r):
    assert Condition().rune_width(r) == 0
    assert Condition(east_asian_width=True, strict_emoji_neutral=False).rune_width(r) == 0


def test_multi_char_string_is_an_error():
    with pytest.raises(TypeError):
        Condition().rune_width("ab")


def test_deterministic():
    c = Condition(east_asian_width=True, strict_emoji_neutral=False)
    sample = list(range(0, MAX_CODEPOINT + 1, 251))
    first = [c.rune_width(r) for r in sample]
    Condition().rune_width(0x4E16)
    assert [c.rune_width(r) for r in sample] == first


@pytest.mark.parametrize(
    "east_asian_width, strict_emoji_neutral, want",
    [
        (False, True, WIDTH_SHA_EA_NO),
        (False, False, WIDTH_SHA_EA_NO),
        (True, True, WIDTH_SHA_EA_YES),
        (True, False, WIDTH_SHA_EA_YES_NON_STRICT),
    ],
)
def test_width_checksums(width_sha, east_asian_width, strict_emoji_neutral, want):
    assert width_sha(Condition(east_asian_width, strict_emoji_neutral)) == want


AMBIGUOUS = [
    ("世", False),
    ("■", True),
    ("界", False),
    ("○", True),
    ("㈱", False),
    ("①", True),
    ("②", True),
    ("③", True),
    ("④", True),
    ("⑤", True),
    ("⑥", True),
    ("⑦", True),
    ("⑧", True),
    ("⑨", True),
    ("⑩", True),
    ("⑪", True),
    ("⑫", True),
    ("⑬", True),
    ("⑭", True),
    ("⑮", True),
    ("⑯", True),
    ("⑰", True),
    ("⑱", True),
    ("⑲", True),
    ("⑳", True),
    ("☆", True),
    ("\ue000", True),  # private use
]


@pytest.mark.parametrize("r, out", AMBIGUOUS)
def test_is_ambiguous_width(r, out):
    assert is_ambiguous_width(r) is out
    assert is_ambiguous_width(ord(r)) is out


@pytest.mark.parametrize(
    "r, out",
    [("→", False), ("┊", False), ("┈", False), ("～", False), ("└", False), ("⣀", True)],
)
def test_is_neutral_width(r, out):
    assert is_neutral_width(r) is out
