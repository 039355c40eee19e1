# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
"""Environment and locale hints for the default East Asian Width setting.

Nothing in this module runs implicitly. Callers decide when the environment
is (re)consulted, normally once at startup through :func:`load_condition`.
"""

import enum
import logging
import os
import re
from typing import Mapping

from .condition import Condition

_logger = logging.getLogger(__name__)

ENV_EASTASIAN = "RUNEWIDTH_EASTASIAN"
LOCALE_VARS = ("LC_ALL", "LC_CTYPE", "LANG")

_LOCALE = re.compile(r"^[a-z][a-z][a-z]?(?:_[A-Z][A-Z])?\.(.+)")

# Maximum bytes per character for charsets that matter to the decision.
MBLEN = {
    "utf-8": 6,
    "utf8": 6,
    "jis": 8,
    "eucjp": 3,
    "euckr": 2,
    "euccn": 2,
    "sjis": 2,
    "cp932": 2,
    "cp51932": 2,
    "cp936": 2,
    "cp949": 2,
    "cp950": 2,
    "big5": 2,
    "gbk": 2,
    "gb2312": 2,
}


class EastAsianHint(enum.Enum):
    OFF = 0
    ON = 1
    AUTO = 2


def read_east_asian_hint(environ: Mapping[str, str] | None = None) -> EastAsianHint:
    """Read ``RUNEWIDTH_EASTASIAN``: "1" forces on, empty or unset means auto.

    Any other value forces the setting off.
    """
    if environ is None:
        environ = os.environ
    value = environ.get(ENV_EASTASIAN, "")
    if value == "":
        return EastAsianHint.AUTO
    if value == "1":
        return EastAsianHint.ON
    if value != "0":
        _logger.debug("%s=%r is not 0 or 1, treating as 0", ENV_EASTASIAN, value)
    return EastAsianHint.OFF


def is_east_asian_locale(locale: str) -> bool:
    """Return True if ``locale`` (e.g. ``ja_JP.UTF-8``) implies wide ambiguous characters."""
    charset = locale.lower()
    if m := _LOCALE.match(locale):
        charset = m.group(1).lower()
    if charset.endswith("@cjk_narrow"):
        return False
    charset = charset.partition("@")[0]
    if not charset:
        return False
    if MBLEN.get(charset, 1) <= 1:
        return False
    return not charset.startswith("u") or locale.startswith(("ja", "ko", "zh"))


def is_east_asian(environ: Mapping[str, str] | None = None) -> bool:
    """Guess from the locale variables whether the terminal is East Asian."""
    if environ is None:
        environ = os.environ
    locale = ""
    for name in LOCALE_VARS:
        locale = environ.get(name, "")
        if locale:
            break
    if locale in ("POSIX", "C"):
        return False
    if len(locale) > 1 and locale[0] == "C" and locale[1] in ".-":
        return False
    return is_east_asian_locale(locale)


def load_condition(
    environ: Mapping[str, str] | None = None, strict_emoji_neutral: bool = True
) -> Condition:
    """Build a Condition from the environment.

    ``RUNEWIDTH_EASTASIAN`` wins when set; otherwise the locale decides.
    """
    hint = read_east_asian_hint(environ)
    if hint is EastAsianHint.AUTO:
        east_asian_width = is_east_asian(environ)
        _logger.debug("east asian width from locale: %s", east_asian_width)
    else:
        east_asian_width = hint is EastAsianHint.ON
    return Condition(east_asian_width, strict_emoji_neutral)
