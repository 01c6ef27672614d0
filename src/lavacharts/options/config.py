# SPDX-FileCopyrightText: 2026-present The Lavacharts Options Authors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: lavacharts-options
# FILE:           src/lavacharts/options/config.py
# DESCRIPTION:    Base class for option bags
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

"""Lavacharts Options - Base class for option bags

Chart options are passed to the rendering engine as nested plain mappings. This module
provides a framework for building such mappings from validated values:

*   Each option bag type declares a closed set of option names, one setter method per name
    marked with the `option` decorator. Declared names are inherited and merged with base
    class names.
*   Options could be set via fluent setter calls, or all at once from a mapping passed to
    the constructor. Unknown names raise `.InvalidConfigProperty`, values that fail the
    setter's check raise `.InvalidConfigValue`. The first failure aborts the operation.
*   `ConfigOptions.get_values()` returns plain dictionary with set options only, with value
    objects and nested option bags flattened.
*   Option bags could be loaded from (and written to) configuration files in
    `configparser` format, and serialized to `google.protobuf.Struct` messages.

Example::

    from lavacharts.options.config import ConfigOptions, option

    class Tooltip(ConfigOptions):
        '''Tooltip options.'''
        @option('trigger', str)
        def trigger(self, trigger: str) -> Self:
            return self._set_enum('trigger', trigger, ['focus', 'none', 'selection'])
        @option('isHtml', bool)
        def is_html(self, is_html: bool) -> Self:
            return self._set_bool('isHtml', is_html)

    tooltip = Tooltip({'trigger': 'focus'}).is_html(True)
    print(tooltip.get_values())  # Output: {'trigger': 'focus', 'isHtml': True}

    Tooltip({'trigger': 'hover'})
    # InvalidConfigValue: Invalid value for Tooltip.trigger, must be type (string)
    #                     with a value of focus|none|selection
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Mapping, Sequence
from configparser import ConfigParser
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, ClassVar, Self

from google.protobuf import json_format
from google.protobuf.struct_pb2 import Struct as StructProto

from .helpers import (
    between,
    describe_enumeration,
    enumeration_contains,
    is_int,
    is_non_empty_str,
    is_number,
    is_style_value,
)
from .logging import BraceMessage, get_logger
from .strconv import convert_from_str, convert_to_str
from .types import Error, InvalidConfigProperty, InvalidConfigValue, StringValue


@dataclass(frozen=True)
class OptionSpec:
    """Declaration of single option.

    Arguments:
        name: Option name as used by rendering engine (and in payload mappings).
        setter: Function that validates and stores the option value.
        datatype: Option value type used for conversion from strings and protobuf
                  messages. `None` means the value is passed to setter as is.
    """
    #: Option name.
    name: str
    #: Function that validates and stores the option value.
    setter: Callable[[Any, Any], Any]
    #: Option value type.
    datatype: type | None = None
    def is_nested(self) -> bool:
        """Returns True if option value is another option bag.
        """
        return isinstance(self.datatype, type) and issubclass(self.datatype, ConfigOptions)

def option(name: str, datatype: type | None=None) -> Callable:
    """Decorator that declares method as setter for option `name`.

    Arguments:
        name: Option name.
        datatype: Option value type (see `OptionSpec.datatype`).
    """
    def decorator(fn: Callable) -> Callable:
        fn._option_ = OptionSpec(name, fn, datatype)
        return fn
    return decorator

def _flatten(value: Any) -> Any:
    if isinstance(value, StringValue):
        return value.get_value()
    if isinstance(value, ConfigOptions) or is_style_value(value):
        return value.get_values()
    return value

class ConfigOptions:
    """Base class for option bags.

    Arguments:
        config: Optional mapping of option names to values. Matching setter is called for
                each item, in mapping order.

    Raises:
        InvalidConfigProperty: When `config` contains undeclared option name.
        InvalidConfigValue: When setter rejects the value.
        TypeError: When `config` is not a mapping.

    Important:
        Descendants declare options by setter methods decorated with `option`. The setter
        must validate the value and store it via `_set()` (or one of the `_set_*` helpers),
        returning the option bag to allow call chaining.
    """
    #: Option declarations (option name: `OptionSpec`), merged with base classes.
    _options_: ClassVar[dict[str, OptionSpec]] = {}
    def __init_subclass__(cls, /, **kwargs) -> None:
        super().__init_subclass__(**kwargs)
        table: dict[str, OptionSpec] = {}
        for base in reversed(cls.__mro__[1:]):
            table.update(vars(base).get('_options_', {}))
        own: dict[str, OptionSpec] = {}
        for attr in vars(cls).values():
            if isinstance(spec := getattr(attr, '_option_', None), OptionSpec):
                if spec.name in own:
                    raise TypeError(f"Option '{spec.name}' declared more than once in {cls.__name__}")
                own[spec.name] = spec
        table.update(own)
        cls._options_ = table
    def __init__(self, config: Mapping[str, Any] | None=None):
        self._values: dict[str, Any] = {}
        self._logger = get_logger(self, 'options')
        if config is not None:
            if not isinstance(config, Mapping):
                raise TypeError(f"{self.__class__.__name__} options must be a mapping, "
                                f"not '{type(config).__name__}'")
            self._logger.debug(BraceMessage("Building {0} from {1} option(s)",
                                            self.__class__.__name__, len(config)))
            for name, value in config.items():
                self.set_option(name, value)
    def __repr__(self):
        return f"{self.__class__.__name__}({self.get_values()!r})"
    def __eq__(self, other) -> bool:
        if isinstance(other, ConfigOptions):
            return type(self) is type(other) and self._values == other._values
        return NotImplemented
    __hash__ = None
    def __contains__(self, name: str) -> bool:
        return name in self._values
    def _set(self, name: str, value: Any) -> Self:
        """Stores validated option value, replacing the previous one.

        Arguments:
            name: Option name.
            value: Option value.

        Raises:
            InvalidConfigProperty: When option name is not declared.
            InvalidConfigValue: When value is `None`.
        """
        if name not in self._options_:
            raise InvalidConfigProperty(self.__class__.__name__, name, self.options)
        if value is None:
            raise self.invalid_value(name, 'any', 'other than None')
        self._values[name] = value
        self._logger.debug(BraceMessage("{0}.{1} = {2!r}", self.__class__.__name__, name, value))
        return self
    def _set_bool(self, name: str, value: Any) -> Self:
        if not isinstance(value, bool):
            raise self.invalid_value(name, 'boolean')
        return self._set(name, value)
    def _set_int(self, name: str, value: Any, lower: int | None=None,
                 upper: int | None=None) -> Self:
        extra = None
        if lower is not None and upper is not None:
            extra = f'between {lower} - {upper}'
            valid = is_int(value) and between(lower, value, upper)
        elif lower is not None:
            extra = f'greater than or equal to {lower}'
            valid = is_int(value) and value >= lower
        else:
            valid = is_int(value)
        if not valid:
            raise self.invalid_value(name, 'int', extra)
        return self._set(name, value)
    def _set_number(self, name: str, value: Any) -> Self:
        if not is_number(value):
            raise self.invalid_value(name, 'int|float')
        return self._set(name, value)
    def _set_str(self, name: str, value: Any) -> Self:
        if not is_non_empty_str(value):
            raise self.invalid_value(name, 'string', 'that is not empty')
        return self._set(name, value)
    def _set_enum(self, name: str, value: Any, allowed: Sequence[Any]) -> Self:
        if not enumeration_contains(value, allowed):
            expected = 'int' if allowed and is_int(allowed[0]) else 'string'
            raise self.invalid_value(name, expected,
                                     f'with a value of {describe_enumeration(allowed)}')
        return self._set(name, value)
    def _set_style(self, name: str, value: Any, kind: str) -> Self:
        """Stores style value. A mapping is converted to the option's declared style bag,
        and its validation errors are re-raised as `.InvalidConfigValue` for `name`
        chained from the original error.
        """
        if isinstance(value, Mapping) and (spec := self._options_.get(name)) and spec.is_nested():
            try:
                value = spec.datatype(value)
            except Error as exc:
                raise self.invalid_value(name, f'{kind}Style') from exc
        if not is_style_value(value, kind):
            raise self.invalid_value(name, f'{kind}Style')
        return self._set(name, value)
    def invalid_value(self, option: str, expected: str, extra: str | None=None) -> InvalidConfigValue:
        """Returns `.InvalidConfigValue` for option of this option bag.

        Arguments:
            option: Option name.
            expected: Description of expected value kind.
            extra: Optional constraint clause.
        """
        return InvalidConfigValue(self.__class__.__name__, option, expected, extra)
    def set_option(self, name: str, value: Any) -> Self:
        """Sets option value via its setter.

        Arguments:
            name: Option name.
            value: Option value.

        Raises:
            InvalidConfigProperty: When option name is not declared.
            InvalidConfigValue: When setter rejects the value.
        """
        if (spec := self._options_.get(name)) is None:
            raise InvalidConfigProperty(self.__class__.__name__, name, self.options)
        return spec.setter(self, value)
    def has_value(self, name: str) -> bool:
        """Returns True if option has a value.

        Raises:
            InvalidConfigProperty: When option name is not declared.
        """
        if name not in self._options_:
            raise InvalidConfigProperty(self.__class__.__name__, name, self.options)
        return name in self._values
    def get_value(self, name: str) -> Any:
        """Returns stored option value (not flattened), or `None` when option is not set.

        Raises:
            InvalidConfigProperty: When option name is not declared.
        """
        if name not in self._options_:
            raise InvalidConfigProperty(self.__class__.__name__, name, self.options)
        return self._values.get(name)
    def get_values(self) -> dict[str, Any]:
        """Returns dictionary with values of options that were set, in the order they were
        set for the first time. Value objects and nested option bags are flattened to plain
        values.
        """
        return {name: _flatten(value) for name, value in self._values.items()}
    def clear(self) -> None:
        """Removes all option values.
        """
        self._values.clear()
    def load_config(self, config: ConfigParser, section: str) -> None:
        """Update option values from `~configparser.ConfigParser` instance.

        Options with nested option bag value are loaded from `[<section>.<option name>]`
        sections before other options. Empty values are passed to setters as `None`.
        Values defined in DEFAULT section that are not declared options are ignored.
        When loading fails, option values are restored to their state before the call.

        Arguments:
            config:  ConfigParser instance.
            section: Name of section with option values.

        Raises:
            Error: When section does not exist.
            InvalidConfigProperty: When section contains undeclared option.
            InvalidConfigValue: When value could not be converted, or setter rejects it.
        """
        if not config.has_section(section):
            raise Error(f"Configuration error: section '{section}' not found!")
        with self._restore_on_error():
            for name, spec in self._options_.items():
                if spec.is_nested() and config.has_section(subsection := f'{section}.{name}'):
                    nested = spec.datatype()
                    nested.load_config(config, subsection)
                    self.set_option(name, nested)
            names = {config.optionxform(name): name for name in self._options_}
            for key, text in config.items(section):
                if (name := names.get(key)) is None:
                    if key in config.defaults():
                        continue
                    raise InvalidConfigProperty(self.__class__.__name__, key, self.options)
                spec = self._options_[name]
                if spec.is_nested():
                    raise self.invalid_value(name, spec.datatype.__name__,
                                             f"defined in section [{section}.{name}]")
                self.set_option(name, self._from_str(spec, text))
    @contextmanager
    def _restore_on_error(self) -> Iterator[None]:
        saved = dict(self._values)
        try:
            yield
        except Exception:
            self._values = saved
            raise
    def _from_str(self, spec: OptionSpec, text: str) -> Any:
        if not text.strip():
            return None
        if spec.datatype is None:
            return text
        try:
            return convert_from_str(spec.datatype, text)
        except ValueError as exc:
            raise self.invalid_value(spec.name, spec.datatype.__name__) from exc
    def get_config(self, section: str) -> str:
        """Returns string with option values suitable for configuration file processed with
        `~configparser.ConfigParser`. Nested option bags are written to separate sections.

        Arguments:
            section: Section name.
        """
        lines = [f"[{section}]\n"]
        nested = []
        for name, value in self._values.items():
            if isinstance(value, ConfigOptions):
                nested.append(value.get_config(f'{section}.{name}'))
            else:
                lines.append(f"{name} = {convert_to_str(value)}\n")
        for subcfg in nested:
            lines.append('\n')
            lines.append(subcfg)
        return ''.join(lines)
    def save_proto(self, proto: StructProto) -> None:
        """Serialize option values into `google.protobuf.Struct` message.

        Arguments:
            proto: Protobuf message where option values should be stored.
        """
        proto.update(self.get_values())
    def load_proto(self, proto: StructProto) -> None:
        """Set option values from `google.protobuf.Struct` message.

        Protobuf stores all numbers as floats, so integral numbers are converted back to
        `int` for options with `int` datatype before they are passed to setters. When
        loading fails, option values are restored to their state before the call.

        Arguments:
            proto: Protobuf message with option values.

        Raises:
            InvalidConfigProperty: When message contains undeclared option.
            InvalidConfigValue: When setter rejects the value.
        """
        with self._restore_on_error():
            self._load_plain(json_format.MessageToDict(proto))
    def _load_plain(self, data: Mapping[str, Any]) -> None:
        for name in data:
            if name not in self._options_:
                raise InvalidConfigProperty(self.__class__.__name__, name, self.options)
        # Struct keys have no defined order, values are applied in declaration order
        for name, spec in self._options_.items():
            if name not in data:
                continue
            value = data[name]
            if spec.is_nested() and isinstance(value, Mapping):
                nested = spec.datatype()
                nested._load_plain(value)
                value = nested
            elif spec.datatype is int and isinstance(value, float) and value.is_integer():
                value = int(value)
            self.set_option(name, value)
    def to_json(self) -> str:
        """Returns option values as JSON string.
        """
        proto = StructProto()
        self.save_proto(proto)
        return json_format.MessageToJson(proto)
    @property
    def options(self) -> tuple[str, ...]:
        """Declared option names, in declaration order."""
        return tuple(self._options_)
