# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.

import runewidth
from runewidth import Condition


def test_env(monkeypatch):
    monkeypatch.setenv("RUNEWIDTH_EASTASIAN", "0")
    runewidth.apply_env()
    assert runewidth.rune_width("│") == 1


def test_default_is_lazy_and_stable(monkeypatch):
    monkeypatch.setenv("RUNEWIDTH_EASTASIAN", "1")
    c = runewidth.default_condition()
    assert c.east_asian_width is True
    monkeypatch.setenv("RUNEWIDTH_EASTASIAN", "0")
    assert runewidth.default_condition() is c
    assert runewidth.rune_width("☆") == 2


def test_default_follows_locale(monkeypatch):
    monkeypatch.setenv("LANG", "ja_JP.UTF-8")
    assert runewidth.default_condition().east_asian_width is True


def test_set_default_condition():
    c = Condition(east_asian_width=True, strict_emoji_neutral=False)
    runewidth.set_default_condition(c)
    assert runewidth.default_condition() is c
    assert runewidth.rune_width("👁") == 2
    assert runewidth.string_width("☆👁") == 4


def test_apply_env_keeps_emoji_setting(monkeypatch):
    runewidth.set_default_condition(Condition(False, strict_emoji_neutral=False))
    monkeypatch.setenv("RUNEWIDTH_EASTASIAN", "1")
    c = runewidth.apply_env()
    assert c == Condition(True, False)
    assert runewidth.default_condition() is c


def test_apply_env_unchanged(monkeypatch):
    c = Condition()
    runewidth.set_default_condition(c)
    monkeypatch.setenv("RUNEWIDTH_EASTASIAN", "0")
    assert runewidth.apply_env() is c


def test_apply_env_explicit_mapping():
    c = runewidth.apply_env({"RUNEWIDTH_EASTASIAN": "1"})
    assert c.east_asian_width is True
    assert runewidth.rune_width("☆") == 2


def test_reset_default_condition(monkeypatch):
    first = runewidth.default_condition()
    runewidth.reset_default_condition()
    monkeypatch.setenv("RUNEWIDTH_EASTASIAN", "1")
    second = runewidth.default_condition()
    assert second is not first
    assert second.east_asian_width is True


def test_module_predicates():
    assert runewidth.is_ambiguous_width("■")
    assert not runewidth.is_ambiguous_width("世")
    assert runewidth.is_neutral_width("⣀")
    assert not runewidth.is_neutral_width("→")
    assert runewidth.UNICODE_VERSION == (14, 0, 0)
