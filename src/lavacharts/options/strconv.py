# SPDX-FileCopyrightText: 2026-present The Lavacharts Options Authors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: lavacharts-options
# FILE:           src/lavacharts/options/strconv.py
# DESCRIPTION:    Data conversion from/to string
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

"""Lavacharts Options - Data conversion from/to string

Registry of functions that convert option values to and from their string
representation. It's used when option bags are loaded from (or written to)
`configparser` files, where all values are strings.

Example::

    from lavacharts.options.strconv import convert_from_str, convert_to_str

    convert_from_str(int, '45')     # Output: 45
    convert_from_str(bool, 'yes')   # Output: True
    convert_to_str(False)           # Output: no
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from .types import ElementId, Label, StringValue

#: Function that converts typed value to its string representation.
TConvertToStr: TypeAlias = Callable[[Any], str]
#: Function that converts string representation of typed value to typed value.
TConvertFromStr: TypeAlias = Callable[[type, str], Any]

@dataclass
class Convertor:
    """Data convertor registry entry.

    Arguments:
        cls: The data type handled by this convertor.
        to_str: Function that converts an instance of `cls` to string.
        from_str: Function that converts string to an instance of `cls`.
    """
    #: The data type handled by this convertor.
    cls: type
    #: Function that converts an instance of `cls` to string.
    to_str: TConvertToStr
    #: Function that converts string to an instance of `cls`.
    from_str: TConvertFromStr
    @property
    def name(self) -> str:
        """Simple type name (e.g. 'int')."""
        return self.cls.__name__

_convertors: dict[type, Convertor] = {}

#: Valid string literals for True value.
TRUE_STR: list[str] = ['yes', 'true', 'on', 'y', '1']
#: Valid string literals for False value.
FALSE_STR: list[str] = ['no', 'false', 'off', 'n', '0']

def any2str(value: Any) -> str:
    """Default `to_str` convertor, uses `str(value)`.
    """
    return str(value)

def str2any(cls: type, value: str) -> Any:
    """Default `from_str` convertor, uses `cls(value)`.
    """
    return cls(value)

def register_convertor(cls: type, *, to_str: TConvertToStr=any2str,
                       from_str: TConvertFromStr=str2any) -> None:
    """Registers convertor functions for data type. Previous registration for the same
    type is replaced.

    Arguments:
        cls:      Class to register convertor for.
        to_str:   Function that converts an instance of `cls` to `str`.
        from_str: Function that converts `str` to value of `cls` data type.
    """
    _convertors[cls] = Convertor(cls, to_str, from_str)

def has_convertor(cls: type) -> bool:
    """Returns True if convertor is registered for the class or any of its bases.
    """
    return _find_convertor(cls) is not None

def _find_convertor(cls: type) -> Convertor | None:
    for base in cls.__mro__:
        if (conv := _convertors.get(base)) is not None:
            return conv
    return None

def get_convertor(cls: type) -> Convertor:
    """Returns convertor registered for data type or its nearest base class.

    Raises:
        TypeError: When there is no convertor for the type.
    """
    if (conv := _find_convertor(cls)) is None:
        raise TypeError(f"Type '{cls.__name__}' has no Convertor")
    return conv

def convert_to_str(value: Any) -> str:
    """Converts value to string using registered convertor.

    Raises:
        TypeError: When there is no convertor for value's type.
    """
    return get_convertor(value.__class__).to_str(value)

def convert_from_str(cls: type, value: str) -> Any:
    """Converts string to value of `cls` type using registered convertor.

    Raises:
        TypeError: When there is no convertor for the type.
        ValueError: When string is not a valid representation of a `cls` value.
    """
    return get_convertor(cls).from_str(cls, value)

def _register() -> None:
    """Registers builtin convertors."""

    def bool2str(value: bool) -> str: # noqa: FBT001
        return TRUE_STR[0] if value else FALSE_STR[0]
    def str2bool(type_: type, value: str) -> bool: # noqa: ARG001
        if (v := value.strip().lower()) in TRUE_STR:
            return True
        if v not in FALSE_STR:
            raise ValueError("Value is not a valid bool string constant")
        return False
    def str2int(type_: type, value: str) -> int:
        return type_(value.strip())
    def str2number(type_: type, value: str) -> float | int:
        # Integral literals stay int, as options like maxValue accept both
        value = value.strip()
        try:
            return int(value)
        except ValueError:
            return type_(value)

    register_convertor(str)
    register_convertor(int, from_str=str2int)
    register_convertor(float, from_str=str2number)
    register_convertor(bool, to_str=bool2str, from_str=str2bool)
    register_convertor(StringValue)
    register_convertor(ElementId)
    register_convertor(Label)

_register()
del _register
