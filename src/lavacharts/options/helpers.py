# SPDX-FileCopyrightText: 2026-present The Lavacharts Options Authors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: lavacharts-options
# FILE:           src/lavacharts/options/helpers.py
# DESCRIPTION:    Validation helpers
# CREATED:        17.10.2026
#
# The contents of this file are subject to the MIT License
#
# Permission is hereby granted, free of charge, to any person obtaining a copy
# of this software and associated documentation files (the "Software"), to deal
# in the Software without restriction, including without limitation the rights
# to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
# copies of the Software, and to permit persons to whom the Software is
# furnished to do so, subject to the following conditions:
#
# The above copyright notice and this permission notice shall be included in all
# copies or substantial portions of the Software.
#
# THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
# IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
# FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
# AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
# LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
# OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN THE
# SOFTWARE.
#
# Copyright (c) 2026 The Lavacharts Options Authors
# All Rights Reserved.
#
# Contributor(s): ______________________________________.

"""Lavacharts Options - Validation helpers

Stateless predicates used by option setters. None of them raise; setters interpret
the result and raise `.InvalidConfigValue` themselves.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class StyleValue(Protocol):
    """Structural type of style sub-objects (e.g. `.TextStyle`).

    Any object that could be flattened via `get_values()` and carries a `style_kind`
    marker is accepted where style option is expected.
    """
    #: Kind of style, e.g. 'text'.
    style_kind: str
    def get_values(self) -> dict[str, Any]:
        """Returns style options as plain dictionary.
        """

def between(lower: Any, value: Any, upper: Any) -> bool:
    """Returns True if `lower` <= `value` <= `upper`.
    """
    return lower <= value <= upper

def is_int(value: Any) -> bool:
    """Returns True if value is `int`, but not `bool`.
    """
    return isinstance(value, int) and not isinstance(value, bool)

def is_number(value: Any) -> bool:
    """Returns True if value is `int` or `float`, but not `bool`.
    """
    return isinstance(value, int | float) and not isinstance(value, bool)

def is_non_empty_str(value: Any) -> bool:
    """Returns True if value is a string with at least one non-whitespace character.
    """
    return isinstance(value, str) and bool(value.strip())

def enumeration_contains(candidate: Any, allowed: Sequence[Any]) -> bool:
    """Returns True if `candidate` is one of `allowed` values.

    The comparison is exact (and thus case-sensitive for strings), and candidate must be
    an instance of the member type. Booleans never match integer members, so `True` is
    not accepted where `1` is allowed.
    """
    return any(isinstance(candidate, type(item)) and candidate == item
               and isinstance(candidate, bool) == isinstance(item, bool)
               for item in allowed)

def describe_enumeration(allowed: Sequence[Any]) -> str:
    """Returns allowed values joined with '|' in their declared order.

    Example::

        describe_enumeration(['start', 'center', 'end'])  # Output: start|center|end
    """
    return '|'.join(str(item) for item in allowed)

def is_style_value(value: Any, kind: str | None=None) -> bool:
    """Returns True if value could be used as style sub-object.

    Arguments:
        value: Checked value.
        kind: When specified, the `style_kind` of value must match it.
    """
    if not isinstance(value, StyleValue):
        return False
    return kind is None or value.style_kind == kind
