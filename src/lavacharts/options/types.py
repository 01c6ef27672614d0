# SPDX-FileCopyrightText: 2026-present The Lavacharts Options Authors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: lavacharts-options
# FILE:           src/lavacharts/options/types.py
# DESCRIPTION:    Exceptions and validated value types
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

"""Lavacharts Options - Exceptions and validated value types

This module provides the building blocks shared by all option bags:

- A base exception class (`Error`) with keyword attributes.
- The option error taxonomy (`InvalidConfigProperty`, `InvalidConfigValue`,
  `InvalidValueObject` and its descendants).
- Validated string value objects (`StringValue`, `ElementId`, `Label`).

Example::

    from lavacharts.options.types import ElementId, InvalidElementId

    chart_id = ElementId('chart_div')
    print(chart_id)              # Output: chart_div
    print(repr(chart_id))        # Output: ElementId('chart_div')
    print(chart_id.get_value())  # Output: chart_div

    try:
        ElementId('')
    except InvalidElementId as e:
        print(e.value)           # Output: ''
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, Self

# Exceptions

class Error(Exception):
    """Exception intended as a base for all errors raised by this library.

    Keyword arguments passed to the constructor are stored as attributes on the
    exception instance, so handlers can inspect structured context instead of
    parsing the message.

    Important:
        Attribute lookup on this class never fails, as all attributes that are not actually
        set, have `None` value. The special attribute `__notes__` is excluded to keep
        `add_note` working.

    Example::

        try:
            Legend({'position': 'diagonal'})
        except Error as e:
            print(e.owner, e.option)  # Output: Legend position
    """
    def __init__(self, *args, **kwargs):
        super().__init__(*args)
        for name, value in kwargs.items():
            setattr(self, name, value)
    def __getattr__(self, name) -> Any | None:
        if name == '__notes__':
            raise AttributeError
        return None

class InvalidConfigProperty(Error, AttributeError):
    """Raised when a payload key or a setter call targets an undeclared option name.

    Arguments:
        owner: Name of the option bag type.
        name: Option name that was attempted.
        options: Declared option names of the bag, in declaration order.
    """
    def __init__(self, owner: str, name: str, options: Iterable[str]):
        options = tuple(options)
        super().__init__(f"Invalid property '{name}' for {owner}, "
                         f"must be one of: {'|'.join(options)}",
                         owner=owner, name=name, options=options)
    def __reduce__(self):
        return (type(self), (self.owner, self.name, self.options), self.__dict__)

class InvalidConfigValue(Error, ValueError):
    """Raised when a setter receives a value that fails its validation rule.

    Arguments:
        owner: Name of the option bag type.
        option: Option (setter) name.
        expected: Description of expected value kind, e.g. 'int' or 'boolean'.
        extra: Optional constraint clause, e.g. 'between 1 - 90'.
    """
    def __init__(self, owner: str, option: str, expected: str, extra: str | None=None):
        msg = f"Invalid value for {owner}.{option}, must be type ({expected})"
        if extra:
            msg = f"{msg} {extra}"
        super().__init__(msg, owner=owner, option=option, expected=expected, extra=extra)
    def __reduce__(self):
        return (type(self), (self.owner, self.option, self.expected, self.extra), self.__dict__)

class InvalidValueObject(Error, ValueError):
    """Raised when a value object is constructed from a value that breaks its invariant.

    Arguments:
        value_type: Name of the value object type.
        value: The rejected input.
    """
    def __init__(self, value_type: str, value: Any):
        super().__init__(f"{value!r} is not a valid {value_type}",
                         value_type=value_type, value=value)
    def __reduce__(self):
        return (type(self), (self.value_type, self.value), self.__dict__)

class InvalidElementId(InvalidValueObject):
    """Raised when `ElementId` is constructed from an empty or non-string value.
    """
    def __init__(self, value: Any):
        super().__init__('ElementId', value)
    def __reduce__(self):
        return (type(self), (self.value,), self.__dict__)

class InvalidLabel(InvalidValueObject):
    """Raised when `Label` is constructed from an empty or non-string value.
    """
    def __init__(self, value: Any):
        super().__init__('Label', value)
    def __reduce__(self):
        return (type(self), (self.value,), self.__dict__)

# Value objects

class StringValue(str):
    """Non-empty string value.

    It behaves like `str` (so it's immutable, hashable and compares equal to the plain
    string it wraps), but checks at construction time that the value is a string with at
    least one non-whitespace character.

    Descendants could define `_error_` class attribute with `InvalidValueObject` subclass
    that accepts the rejected value as the only argument.

    Raises:
        InvalidValueObject: When value is not a string, or it's empty.
    """
    #: Exception raised for invalid values.
    _error_: type[InvalidValueObject] | None = None
    def __new__(cls, value: str) -> Self:
        if not isinstance(value, str) or not value.strip():
            if cls._error_ is None:
                raise InvalidValueObject(cls.__name__, value)
            raise cls._error_(value)
        return str.__new__(cls, value)
    def __repr__(self):
        return f"{self.__class__.__name__}({str(self)!r})"
    def get_value(self) -> str:
        """Returns wrapped value as plain `str`.
        """
        return str(self)

class ElementId(StringValue):
    """Identifier of the HTML element that hosts a chart.

    Raises:
        InvalidElementId: When value is not a string, or it's empty.
    """
    _error_ = InvalidElementId

class Label(StringValue):
    """Label text used for chart and axis titles.

    Raises:
        InvalidLabel: When value is not a string, or it's empty.
    """
    _error_ = InvalidLabel
