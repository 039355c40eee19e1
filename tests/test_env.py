# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.

import logging

import pytest

from runewidth.env import (
    EastAsianHint,
    is_east_asian,
    is_east_asian_locale,
    load_condition,
    read_east_asian_hint,
)


@pytest.mark.parametrize(
    "environ, want",
    [
        ({}, EastAsianHint.AUTO),
        ({"RUNEWIDTH_EASTASIAN": ""}, EastAsianHint.AUTO),
        ({"RUNEWIDTH_EASTASIAN": "1"}, EastAsianHint.ON),
        ({"RUNEWIDTH_EASTASIAN": "0"}, EastAsianHint.OFF),
        ({"RUNEWIDTH_EASTASIAN": "true"}, EastAsianHint.OFF),
    ],
)
def test_read_east_asian_hint(environ, want):
    assert read_east_asian_hint(environ) is want


def test_read_east_asian_hint_uses_os_environ(monkeypatch):
    assert read_east_asian_hint() is EastAsianHint.AUTO
    monkeypatch.setenv("RUNEWIDTH_EASTASIAN", "1")
    assert read_east_asian_hint() is EastAsianHint.ON


def test_unrecognized_hint_is_logged(caplog):
    with caplog.at_level(logging.DEBUG, logger="runewidth.env"):
        read_east_asian_hint({"RUNEWIDTH_EASTASIAN": "yes"})
    assert "RUNEWIDTH_EASTASIAN" in caplog.text


@pytest.mark.parametrize(
    "locale, want",
    [
        ("ja_JP.UTF-8", True),
        ("ko_KR.UTF-8", True),
        ("zh_TW.utf8", True),
        ("en_US.UTF-8", False),
        ("ja_JP.eucJP", True),
        ("ja_JP.SJIS", True),
        ("zh_CN.GB2312", True),
        ("zh_TW.Big5", True),
        ("ja_JP.UTF-8@cjk_narrow", False),
        ("ja_JP.eucJP@mod", True),
        ("ja_JP", False),
        ("en_US.ISO-8859-1", False),
        ("", False),
    ],
)
def test_is_east_asian_locale(locale, want):
    assert is_east_asian_locale(locale) is want


@pytest.mark.parametrize(
    "environ, want",
    [
        ({}, False),
        ({"LANG": "ja_JP.UTF-8"}, True),
        ({"LC_CTYPE": "ko_KR.UTF-8", "LANG": "en_US.UTF-8"}, True),
        ({"LC_ALL": "en_US.UTF-8", "LC_CTYPE": "ko_KR.UTF-8"}, False),
        ({"LC_ALL": "", "LANG": "zh_CN.UTF-8"}, True),
        ({"LC_ALL": "C", "LANG": "ja_JP.UTF-8"}, False),
        ({"LANG": "POSIX"}, False),
        ({"LANG": "C.UTF-8"}, False),
    ],
)
def test_is_east_asian(environ, want):
    assert is_east_asian(environ) is want


@pytest.mark.parametrize(
    "environ, want",
    [
        ({"RUNEWIDTH_EASTASIAN": "0", "LANG": "ja_JP.UTF-8"}, False),
        ({"RUNEWIDTH_EASTASIAN": "1", "LANG": "en_US.UTF-8"}, True),
        ({"LANG": "ja_JP.UTF-8"}, True),
        ({"LANG": "en_US.UTF-8"}, False),
    ],
)
def test_load_condition(environ, want):
    c = load_condition(environ)
    assert c.east_asian_width is want
    assert c.strict_emoji_neutral is True
    assert c.has_lut is False


def test_load_condition_emoji_setting():
    c = load_condition({"RUNEWIDTH_EASTASIAN": "1"}, strict_emoji_neutral=False)
    assert c.rune_width("👁") == 2
