#!/usr/bin/env python3
#
# Generate the interval tables used by the runewidth package for terminal
# width calculations (East Asian Width, emoji, combining and non-printing
# classes). All Unicode files are fetched from .../<version>/ucd/<path>.
#
# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option. The generated
# Python tables are licensed under the 0BSD.
#
# Unicode data: https://www.unicode.org/license.txt

import enum
import operator
import os
import re
import sys
import urllib.request
from typing import Callable, Iterable

UNICODE_VERSION = "14.0.0"
NUM_CODEPOINTS = 0x110000
OUTPUT_TABLE = os.path.join(os.path.dirname(os.path.abspath(__file__)), "runewidth", "table.py")
RANGES_PER_ROW = 4

# Unlisted code points in these blocks and planes default to W (UAX #11).
DEFAULT_WIDE = [
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
    (0x20000, 0x2FFFD),
    (0x30000, 0x3FFFD),
]

DERIVED_CATEGORY = "extracted/DerivedGeneralCategory.txt"

Codepoint = int


def fetch_open(path_rel_ucd: str, local_prefix: str = ""):
    """Fetch file from Public/<version>/ucd/<path_rel_ucd> into local cache."""
    basename = os.path.basename(path_rel_ucd)
    localname = os.path.join(local_prefix, basename)
    if not os.path.exists(localname):
        try:
            if not hasattr(fetch_open, "_notice"):
                print("\nDownloading Unicode data files from unicode.org...")
                print("By continuing, you agree to the Unicode License:")
                print("  https://www.unicode.org/license.txt\n")
                fetch_open._notice = True
            url = (
                f"https://www.unicode.org/Public/"
                f"{UNICODE_VERSION}/ucd/{path_rel_ucd}"
            )
            urllib.request.urlretrieve(url, localname)
        except Exception as e:
            sys.stderr.write(f"Error downloading {path_rel_ucd}: {e}\n")
            sys.exit(1)

    try:
        return open(localname, encoding="utf-8")
    except OSError as e:
        sys.stderr.write(f"Cannot load {localname}: {e}\n")
        sys.exit(1)


def load_unicode_version(local_prefix: str = "") -> tuple[int, int, int]:
    with fetch_open("ReadMe.txt", local_prefix) as readme:
        m = re.search(r"for Version (\d+)\.(\d+)\.(\d+)", readme.read())
        if not m:
            sys.stderr.write("Could not determine Unicode version\n")
            sys.exit(1)
        return tuple(map(int, m.groups()))


def load_property(
    path_rel_ucd: str,
    pattern: str,
    action: Callable[[int], None],
    local_prefix: str = "",
):
    with fetch_open(path_rel_ucd, local_prefix) as properties:
        single = re.compile(rf"^([0-9A-F]+)\s*;\s*{pattern}\s*#")
        multiple = re.compile(rf"^([0-9A-F]+)\.\.([0-9A-F]+)\s*;\s*{pattern}\s*#")
        for line in properties.readlines():
            raw = None
            if m := single.match(line):
                raw = (m.group(1), m.group(1))
            elif m := multiple.match(line):
                raw = (m.group(1), m.group(2))
            else:
                continue
            lo, hi = int(raw[0], 16), int(raw[1], 16)
            for cp in range(lo, hi + 1):
                action(cp)


def load_set(path_rel_ucd: str, pattern: str, local_prefix: str = "") -> set[Codepoint]:
    out: set[int] = set()
    load_property(path_rel_ucd, pattern, out.add, local_prefix)
    return out


def to_sorted_ranges(it: Iterable[Codepoint]) -> list[tuple[Codepoint, Codepoint]]:
    lst = sorted(it)
    out: list[tuple[int, int]] = []
    for cp in lst:
        if out and out[-1][1] == cp - 1:
            out[-1] = (out[-1][0], cp)
        else:
            out.append((cp, cp))
    return out


class EastAsianWidth(enum.Enum):
    NEUTRAL = "N"
    NARROW = "Na"
    HALFWIDTH = "H"
    WIDE = "W"
    FULLWIDTH = "F"
    AMBIGUOUS = "A"


def load_eaw(local_prefix: str = "") -> list[EastAsianWidth]:
    out = [EastAsianWidth.NEUTRAL] * NUM_CODEPOINTS
    for lo, hi in DEFAULT_WIDE:
        for cp in range(lo, hi + 1):
            out[cp] = EastAsianWidth.WIDE

    with fetch_open("EastAsianWidth.txt", local_prefix) as eaw:
        single = re.compile(r"^([0-9A-F]+)\s*;\s*(\w+) +# ")
        multiple = re.compile(r"^([0-9A-F]+)\.\.([0-9A-F]+)\s*;\s*(\w+) +# ")
        for line in eaw.readlines():
            raw = None
            if m := single.match(line):
                raw = (m.group(1), m.group(1), m.group(2))
            elif m := multiple.match(line):
                raw = (m.group(1), m.group(2), m.group(3))
            else:
                continue
            lo, hi, w = int(raw[0], 16), int(raw[1], 16), EastAsianWidth(raw[2])
            assert lo <= hi
            for cp in range(lo, hi + 1):
                out[cp] = w
    return out


def build_tables(local_prefix: str = "") -> list[tuple[str, list[tuple[Codepoint, Codepoint]]]]:
    eaw = load_eaw(local_prefix)

    unassigned = bytearray(NUM_CODEPOINTS)
    load_property(
        DERIVED_CATEGORY,
        "Cn",
        lambda cp: operator.setitem(unassigned, cp, 1),
        local_prefix,
    )

    private = load_set(DERIVED_CATEGORY, "Co", local_prefix)

    nonprint = load_set(DERIVED_CATEGORY, r"(?:Cc|Cf|Cs|Zl|Zp)", local_prefix)
    nonprint -= load_set("PropList.txt", "Prepended_Concatenation_Mark", local_prefix)
    nonprint |= load_set("PropList.txt", "Noncharacter_Code_Point", local_prefix)

    combining = load_set(DERIVED_CATEGORY, r"(?:Mn|Me)", local_prefix)
    combining |= load_set("HangulSyllableType.txt", r"(?:V|T)", local_prefix)

    pictographic = load_set("emoji/emoji-data.txt", "Extended_Pictographic", local_prefix)
    emoji = {cp for cp in pictographic if cp >= 0xFF}

    def eaw_set(*widths: EastAsianWidth) -> set[int]:
        return {cp for cp, w in enumerate(eaw) if w in widths}

    neutral = {cp for cp in eaw_set(EastAsianWidth.NEUTRAL) if not unassigned[cp]}

    return [
        ("PRIVATE", to_sorted_ranges(private)),
        ("NONPRINT", to_sorted_ranges(nonprint)),
        ("COMBINING", to_sorted_ranges(combining)),
        ("DOUBLEWIDTH", to_sorted_ranges(eaw_set(EastAsianWidth.WIDE, EastAsianWidth.FULLWIDTH))),
        ("AMBIGUOUS", to_sorted_ranges(eaw_set(EastAsianWidth.AMBIGUOUS))),
        ("NARROW", to_sorted_ranges(eaw_set(EastAsianWidth.NARROW))),
        ("NEUTRAL", to_sorted_ranges(neutral)),
        ("EMOJI", to_sorted_ranges(emoji)),
    ]


def emit_tables(
    path: str,
    ver: tuple[int, int, int],
    tables: list[tuple[str, list[tuple[Codepoint, Codepoint]]]],
):
    with open(path, "w", newline="\n") as f:
        f.write(
            f"""# Generated by generate.py; do not edit.
#
# Unicode {ver[0]}.{ver[1]}.{ver[2]} data.
# For terminal width calculation.
#
# Copyright 2025 Dair Aidarkhanov
# SPDX-License-Identifier: 0BSD
\"\"\"Interval tables for Unicode {ver[0]}.{ver[1]}.{ver[2]}.\"\"\"

UNICODE_VERSION = ({ver[0]}, {ver[1]}, {ver[2]})
"""
        )
        for name, ranges in tables:
            f.write(f"\n{name} = (\n")
            for i in range(0, len(ranges), RANGES_PER_ROW):
                row = ranges[i : i + RANGES_PER_ROW]
                f.write("    " + " ".join(f"(0x{lo:04X}, 0x{hi:04X})," for lo, hi in row) + "\n")
            f.write(")\n")


def main():
    print("Generating width tables...")
    ver = load_unicode_version()
    print(f"Unicode version: {ver[0]}.{ver[1]}.{ver[2]}")

    print("Building tables...")
    tables = build_tables()
    for name, ranges in tables:
        print(f"  {name}: {len(ranges)} ranges")

    print(f"Emitting {OUTPUT_TABLE}...")
    emit_tables(OUTPUT_TABLE, ver, tables)

    print("Done.")


if __name__ == "__main__":
    main()
