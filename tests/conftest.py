# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.

import hashlib

import pytest

import runewidth
from runewidth import table
from runewidth.interval import MAX_CODEPOINT

# SHA-256 of the width of every code point, one byte each.
WIDTH_SHA_EA_NO = "1914bda23b5100c5b98af9cc08d0e9cc16e3d0f8c68840294d216a9e61b452cd"
WIDTH_SHA_EA_YES = "3682f2b5be4395546d108a2551ccb44e86d9b9eedd8e58398bb8eb27f74a4b8d"
WIDTH_SHA_EA_YES_NON_STRICT = "5750b4f644af7ef55f091bb0d4f9308de6168b154c36360d615f4e50ae1beb67"

TABLES = {
    "private": table.PRIVATE,
    "nonprint": table.NONPRINT,
    "combining": table.COMBINING,
    "doublewidth": table.DOUBLEWIDTH,
    "ambiguous": table.AMBIGUOUS,
    "narrow": table.NARROW,
    "neutral": table.NEUTRAL,
    "emoji": table.EMOJI,
}

ENV_VARS = ("RUNEWIDTH_EASTASIAN", "LC_ALL", "LC_CTYPE", "LANG")


@pytest.fixture(autouse=True)
def clean_default(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    runewidth.reset_default_condition()
    yield
    runewidth.reset_default_condition()


@pytest.fixture
def width_sha():
    def digest(condition):
        widths = bytes(map(condition.rune_width, range(MAX_CODEPOINT + 1)))
        return hashlib.sha256(widths).hexdigest()

    return digest
