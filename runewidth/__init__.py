# Copyright 2011-2025 The Rust Project Developers.
# Copyright 2025 Dair Aidarkhanov.
#
# Licensed under the Apache License, Version 2.0 <LICENSE-APACHE or
# http://www.apache.org/licenses/LICENSE-2.0> or the MIT license <LICENSE-MIT
# or http://opensource.org/licenses/MIT>, at your option.
"""Terminal cell widths of Unicode code points and strings.

The module-level functions use a process-wide default :class:`Condition`,
created from the environment the first time it is needed. Code that wants
a specific policy should build its own Condition and call its methods.
"""

import logging
from typing import Mapping

from .condition import Condition, is_ambiguous_width, is_neutral_width
from .env import EastAsianHint, is_east_asian, load_condition, read_east_asian_hint
from .interval import MAX_CODEPOINT
from .table import UNICODE_VERSION

__all__ = (
    "Condition",
    "EastAsianHint",
    "MAX_CODEPOINT",
    "UNICODE_VERSION",
    "apply_env",
    "build_lut",
    "default_condition",
    "fill_left",
    "fill_right",
    "is_ambiguous_width",
    "is_east_asian",
    "is_neutral_width",
    "load_condition",
    "read_east_asian_hint",
    "rune_width",
    "set_default_condition",
    "string_width",
    "truncate",
    "truncate_left",
    "wrap",
)
__version__ = "0.1.0"

_logger = logging.getLogger(__name__)

_default: Condition | None = None


def default_condition() -> Condition:
    global _default
    if _default is None:
        _default = load_condition()
    return _default


def set_default_condition(condition: Condition) -> None:
    global _default
    _default = condition


def apply_env(environ: Mapping[str, str] | None = None) -> Condition:
    """Re-read the environment and replace the default Condition.

    Only the East Asian Width flag comes from the environment; the emoji
    setting of the current default is kept. If the current default has a
    LUT, the replacement gets one too.
    """
    global _default
    old = _default
    if old is None:
        new = load_condition(environ)
    else:
        new = load_condition(environ, old.strict_emoji_neutral)
    if old == new:
        return old
    if old is not None and old.has_lut:
        new.build_lut()
    _logger.debug("default condition is now %r", new)
    _default = new
    return new


def reset_default_condition() -> None:
    """Forget the default Condition. Only meant for test isolation."""
    global _default
    _default = None


def build_lut() -> None:
    default_condition().build_lut()


def rune_width(r) -> int:
    return default_condition().rune_width(r)


def string_width(s: str) -> int:
    return default_condition().string_width(s)


def truncate(s: str, w: int, tail: str = "") -> str:
    return default_condition().truncate(s, w, tail)


def truncate_left(s: str, w: int, prefix: str = "") -> str:
    return default_condition().truncate_left(s, w, prefix)


def wrap(s: str, w: int) -> str:
    return default_condition().wrap(s, w)


def fill_left(s: str, w: int) -> str:
    return default_condition().fill_left(s, w)


def fill_right(s: str, w: int) -> str:
    return default_condition().fill_right(s, w)
