# SPDX-FileCopyrightText: 2026-present The Lavacharts Options Authors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: lavacharts-options
# FILE:           tests/test_config.py
# DESCRIPTION:    Tests for lavacharts.options.config
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

"""lavacharts-options - Unit tests for lavacharts.options.config
"""

from __future__ import annotations

import json
from configparser import ConfigParser
from typing import Self

import pytest
from google.protobuf.struct_pb2 import Struct as StructProto

from lavacharts.options.config import ConfigOptions, OptionSpec, option
from lavacharts.options.configs import TextStyle
from lavacharts.options.types import (
    ElementId,
    Error,
    InvalidConfigProperty,
    InvalidConfigValue,
    InvalidElementId,
)

# --- Test Helper Classes ---

class Tooltip(ConfigOptions):
    """Option bag used to test the base class."""
    @option('trigger', str)
    def trigger(self, trigger: str) -> Self:
        return self._set_enum('trigger', trigger, ['focus', 'none', 'selection'])
    @option('isHtml', bool)
    def is_html(self, is_html: bool) -> Self:
        return self._set_bool('isHtml', is_html)
    @option('opacity', float)
    def opacity(self, opacity: float) -> Self:
        return self._set_number('opacity', opacity)
    @option('delay', int)
    def delay(self, delay: int) -> Self:
        return self._set_int('delay', delay, 0, 5000)
    @option('anchor', str)
    def anchor(self, anchor: str) -> Self:
        return self._set('anchor', ElementId(anchor))
    @option('textStyle', TextStyle)
    def text_style(self, style: TextStyle) -> Self:
        return self._set_style('textStyle', style, 'text')

class RichTooltip(Tooltip):
    """Descendant that adds an option and overrides a base setter."""
    @option('showColorCode', bool)
    def show_color_code(self, show: bool) -> Self:
        return self._set_bool('showColorCode', show)
    @option('trigger', str)
    def trigger(self, trigger: str) -> Self:
        return self._set_enum('trigger', trigger, ['focus', 'both'])

class Panel(ConfigOptions):
    """Option bag with nested non-style option bag."""
    @option('tooltip', Tooltip)
    def tooltip(self, tooltip: Tooltip) -> Self:
        if not isinstance(tooltip, Tooltip):
            raise self.invalid_value('tooltip', 'Tooltip')
        return self._set('tooltip', tooltip)

TOOLTIP_OPTIONS = ('trigger', 'isHtml', 'opacity', 'delay', 'anchor', 'textStyle')

# --- Test Functions ---

def test_declared_options():
    """Tests declared option names, their order and merging with base class names."""
    assert ConfigOptions().options == ()
    assert Tooltip().options == TOOLTIP_OPTIONS
    assert RichTooltip().options == TOOLTIP_OPTIONS + ('showColorCode', )
    assert isinstance(Tooltip._options_['trigger'], OptionSpec)
    assert Tooltip._options_['trigger'].datatype is str
    assert Tooltip._options_['textStyle'].is_nested()
    assert not Tooltip._options_['trigger'].is_nested()
    # Override replaces setter, but keeps base position
    assert RichTooltip._options_['trigger'].setter is RichTooltip.trigger
    assert Tooltip._options_['trigger'].setter is Tooltip.trigger

def test_duplicate_declaration():
    """Tests that declaring the same option twice in one class fails."""
    with pytest.raises(TypeError, match="Option 'trigger' declared more than once in Broken"):
        class Broken(ConfigOptions):
            @option('trigger')
            def trigger(self, value):
                return self._set('trigger', value)
            @option('trigger')
            def trigger_again(self, value):
                return self._set('trigger', value)

def test_empty():
    """Tests freshly created option bag."""
    tip = Tooltip()
    assert tip.get_values() == {}
    assert not tip.has_value('trigger')
    assert tip.get_value('trigger') is None
    assert 'trigger' not in tip
    assert repr(tip) == "Tooltip({})"

def test_fluent_setters():
    """Tests chained setter calls and values read-back."""
    tip = Tooltip()
    assert tip.trigger('focus') is tip
    tip.is_html(True).opacity(0.5).delay(100)
    assert tip.get_values() == {'trigger': 'focus', 'isHtml': True, 'opacity': 0.5, 'delay': 100}
    assert tip.has_value('isHtml')
    assert 'delay' in tip
    assert tip.get_value('delay') == 100

def test_payload():
    """Tests construction from mapping."""
    tip = Tooltip({'trigger': 'selection', 'isHtml': False})
    assert tip.get_values() == {'trigger': 'selection', 'isHtml': False}
    assert list(tip.get_values()) == ['trigger', 'isHtml']
    # Payload order is preserved
    tip = Tooltip({'isHtml': False, 'trigger': 'selection'})
    assert list(tip.get_values()) == ['isHtml', 'trigger']
    # Empty mapping
    assert Tooltip({}).get_values() == {}

def test_payload_not_mapping():
    """Tests that payload must be a mapping."""
    with pytest.raises(TypeError, match="Tooltip options must be a mapping, not 'list'"):
        Tooltip([('trigger', 'focus')])

def test_payload_unknown_option():
    """Tests that undeclared payload key aborts construction."""
    with pytest.raises(InvalidConfigProperty) as cm:
        Tooltip({'trigger': 'focus', 'color': 'red'})
    assert cm.value.owner == 'Tooltip'
    assert cm.value.name == 'color'
    assert cm.value.options == TOOLTIP_OPTIONS
    assert 'trigger|isHtml|opacity|delay|anchor|textStyle' in str(cm.value)

def test_payload_invalid_value():
    """Tests that first invalid value aborts construction."""
    with pytest.raises(InvalidConfigValue) as cm:
        Tooltip({'trigger': 'hover', 'isHtml': 'yes'})
    assert cm.value.owner == 'Tooltip'
    assert cm.value.option == 'trigger'
    assert cm.value.extra == 'with a value of focus|none|selection'

def test_set_option():
    """Tests generic setter dispatch."""
    tip = Tooltip()
    assert tip.set_option('trigger', 'none') is tip
    assert tip.get_values() == {'trigger': 'none'}
    with pytest.raises(InvalidConfigProperty) as cm:
        tip.set_option('showColorCode', True)
    assert cm.value.name == 'showColorCode'
    assert RichTooltip().set_option('showColorCode', True).get_values() == {'showColorCode': True}

def test_set_undeclared():
    """Tests that storage refuses undeclared names and None values."""
    tip = Tooltip()
    with pytest.raises(InvalidConfigProperty):
        tip._set('color', 'red')
    with pytest.raises(InvalidConfigValue) as cm:
        tip._set('trigger', None)
    assert cm.value.option == 'trigger'
    assert tip.get_values() == {}

def test_query_undeclared():
    """Tests that queries for undeclared names fail."""
    tip = Tooltip()
    with pytest.raises(InvalidConfigProperty):
        tip.has_value('color')
    with pytest.raises(InvalidConfigProperty):
        tip.get_value('color')

def test_invalid_values():
    """Tests validation helpers used by setters."""
    tip = Tooltip()
    with pytest.raises(InvalidConfigValue) as cm:
        tip.is_html(1)
    assert cm.value.expected == 'boolean'
    with pytest.raises(InvalidConfigValue) as cm:
        tip.opacity('0.5')
    assert cm.value.expected == 'int|float'
    with pytest.raises(InvalidConfigValue) as cm:
        tip.opacity(True)
    with pytest.raises(InvalidConfigValue) as cm:
        tip.delay(5001)
    assert cm.value.extra == 'between 0 - 5000'
    with pytest.raises(InvalidConfigValue) as cm:
        tip.delay(10.0)
    assert cm.value.expected == 'int'
    assert cm.value.extra == 'between 0 - 5000'
    with pytest.raises(InvalidConfigValue) as cm:
        tip.text_style({'fontSize': 'big'})
    assert cm.value.owner == 'Tooltip'
    assert cm.value.option == 'textStyle'
    assert isinstance(cm.value.__cause__, InvalidConfigValue)
    assert cm.value.__cause__.owner == 'TextStyle'
    assert cm.value.__cause__.option == 'fontSize'
    with pytest.raises(InvalidConfigValue) as cm:
        tip.text_style({'fontColor': 'red'})
    assert cm.value.option == 'textStyle'
    assert isinstance(cm.value.__cause__, InvalidConfigProperty)
    with pytest.raises(InvalidConfigValue) as cm:
        tip.text_style(Tooltip())
    assert cm.value.owner == 'Tooltip'
    assert cm.value.expected == 'textStyle'
    assert tip.get_values() == {}

def test_overwrite():
    """Tests that setting an option again keeps only the last value."""
    tip = Tooltip().trigger('focus').is_html(True)
    tip.trigger('none')
    assert tip.get_values() == {'trigger': 'none', 'isHtml': True}
    # Failed set keeps previous value
    with pytest.raises(InvalidConfigValue):
        tip.trigger('hover')
    assert tip.get_value('trigger') == 'none'

def test_get_values_idempotent():
    """Tests that get_values() has no side effects."""
    tip = Tooltip({'trigger': 'focus', 'textStyle': {'fontSize': 10}})
    first = tip.get_values()
    second = tip.get_values()
    assert first == second
    assert first is not second
    first['trigger'] = 'none'
    first['textStyle']['fontSize'] = 20
    assert tip.get_values() == second

def test_flatten():
    """Tests flattening of value objects and nested option bags."""
    tip = Tooltip().anchor('chart_div').text_style(TextStyle().bold(True))
    assert isinstance(tip.get_value('anchor'), ElementId)
    assert isinstance(tip.get_value('textStyle'), TextStyle)
    values = tip.get_values()
    assert values == {'anchor': 'chart_div', 'textStyle': {'bold': True}}
    assert type(values['anchor']) is str
    #
    panel = Panel({'tooltip': Tooltip({'trigger': 'focus'})})
    assert panel.get_values() == {'tooltip': {'trigger': 'focus'}}

def test_value_object_error_propagates():
    """Tests that value object errors raised in setter propagate unchanged."""
    with pytest.raises(InvalidElementId):
        Tooltip({'anchor': ''})

def test_style_from_mapping():
    """Tests that style option accepts mapping and validates it."""
    tip = Tooltip({'textStyle': {'color': 'red', 'fontSize': 12}})
    assert isinstance(tip.get_value('textStyle'), TextStyle)
    assert tip.get_values() == {'textStyle': {'color': 'red', 'fontSize': 12}}

def test_equality():
    """Tests equality of option bags."""
    assert Tooltip({'trigger': 'focus'}) == Tooltip().trigger('focus')
    assert Tooltip({'trigger': 'focus'}) != Tooltip({'trigger': 'none'})
    assert Tooltip({'trigger': 'focus'}) != RichTooltip({'trigger': 'focus'})
    assert Tooltip() != {}
    with pytest.raises(TypeError):
        hash(Tooltip())

def test_clear():
    """Tests removal of all values."""
    tip = Tooltip({'trigger': 'focus', 'isHtml': True})
    tip.clear()
    assert tip.get_values() == {}
    assert not tip.has_value('trigger')

def test_invalid_value_factory():
    """Tests construction of InvalidConfigValue for option bag."""
    e = Tooltip().invalid_value('delay', 'int', 'between 0 - 5000')
    assert isinstance(e, InvalidConfigValue)
    assert e.owner == 'Tooltip'
    assert e.option == 'delay'
    assert e.expected == 'int'
    assert e.extra == 'between 0 - 5000'

def test_load_config(base_conf: ConfigParser):
    """Tests loading options from configparser sections."""
    base_conf.read_string("""
[DEFAULT]
unrelated = value
[tooltip]
trigger = selection
isHtml = yes
opacity = 0.25
delay = 250
anchor = chart_div
[tooltip.textStyle]
fontSize = 11
italic = off
""")
    tip = Tooltip()
    tip.load_config(base_conf, 'tooltip')
    assert tip.get_values() == {'textStyle': {'fontSize': 11, 'italic': False},
                                'trigger': 'selection', 'isHtml': True, 'opacity': 0.25,
                                'delay': 250, 'anchor': 'chart_div'}
    assert isinstance(tip.get_value('delay'), int)

def test_load_config_integral_float(base_conf: ConfigParser):
    """Tests that integral literal for number option is loaded as int."""
    base_conf.read_string("[tooltip]\nopacity = 1\n")
    tip = Tooltip()
    tip.load_config(base_conf, 'tooltip')
    assert tip.get_value('opacity') == 1
    assert isinstance(tip.get_value('opacity'), int)

def test_load_config_errors(base_conf: ConfigParser):
    """Tests failures while loading options from configparser."""
    base_conf.read_string("""
[unknown]
color = red
[bad_int]
delay = soon
[bad_enum]
trigger = hover
[empty]
delay =
[nested]
textStyle = bold
""")
    tip = Tooltip()
    with pytest.raises(Error, match="Configuration error: section 'missing' not found!"):
        tip.load_config(base_conf, 'missing')
    with pytest.raises(InvalidConfigProperty) as cm:
        tip.load_config(base_conf, 'unknown')
    assert cm.value.name == 'color'
    with pytest.raises(InvalidConfigValue) as cm:
        tip.load_config(base_conf, 'bad_int')
    assert cm.value.option == 'delay'
    assert isinstance(cm.value.__cause__, ValueError)
    with pytest.raises(InvalidConfigValue) as cm:
        tip.load_config(base_conf, 'bad_enum')
    assert cm.value.option == 'trigger'
    with pytest.raises(InvalidConfigValue) as cm:
        tip.load_config(base_conf, 'empty')
    assert cm.value.option == 'delay'
    with pytest.raises(InvalidConfigValue) as cm:
        tip.load_config(base_conf, 'nested')
    assert cm.value.option == 'textStyle'
    assert cm.value.extra == 'defined in section [nested.textStyle]'

def test_load_config_failure_keeps_values(base_conf: ConfigParser):
    """Tests that failed load leaves previously set options untouched."""
    base_conf.read_string("""
[partial]
trigger = none
isHtml = yes
delay = 9999
[partial.textStyle]
fontSize = 20
""")
    tip = Tooltip({'trigger': 'focus', 'textStyle': {'color': 'red'}})
    with pytest.raises(InvalidConfigValue) as cm:
        tip.load_config(base_conf, 'partial')
    assert cm.value.option == 'delay'
    assert tip.get_values() == {'trigger': 'focus', 'textStyle': {'color': 'red'}}

def test_get_config(base_conf: ConfigParser):
    """Tests writing options in configparser format and reading them back."""
    tip = Tooltip({'trigger': 'focus', 'isHtml': False, 'delay': 10,
                   'textStyle': {'bold': True, 'color': 'blue'}})
    text = tip.get_config('tooltip')
    assert text == """[tooltip]
trigger = focus
isHtml = no
delay = 10

[tooltip.textStyle]
bold = yes
color = blue
"""
    base_conf.read_string(text)
    other = Tooltip()
    other.load_config(base_conf, 'tooltip')
    assert other == tip

def test_proto(proto: StructProto):
    """Tests serialization to protobuf Struct message and back."""
    tip = Tooltip({'trigger': 'focus', 'isHtml': True, 'delay': 10, 'opacity': 0.5,
                   'anchor': 'chart_div', 'textStyle': {'fontSize': 12}})
    tip.save_proto(proto)
    assert set(proto.keys()) == set(TOOLTIP_OPTIONS)
    assert proto['trigger'] == 'focus'
    assert proto['isHtml'] is True
    assert proto['delay'] == 10
    assert proto['textStyle']['fontSize'] == 12
    #
    other = Tooltip()
    other.load_proto(proto)
    assert isinstance(other.get_value('delay'), int)
    assert isinstance(other.get_value('textStyle').get_value('fontSize'), int)
    assert isinstance(other.get_value('anchor'), ElementId)
    assert other.get_values() == tip.get_values()

def test_proto_errors(proto: StructProto):
    """Tests that protobuf values pass through setters."""
    proto.update({'delay': 10.5})
    with pytest.raises(InvalidConfigValue):
        Tooltip().load_proto(proto)
    proto.Clear()
    proto.update({'color': 'red'})
    with pytest.raises(InvalidConfigProperty):
        Tooltip().load_proto(proto)

def test_load_proto_failure_keeps_values(proto: StructProto):
    """Tests that failed protobuf load leaves previously set options untouched."""
    proto.update({'trigger': 'none', 'textStyle': {'fontSize': 20}, 'delay': -1})
    tip = Tooltip().trigger('focus')
    with pytest.raises(InvalidConfigValue):
        tip.load_proto(proto)
    assert tip.get_values() == {'trigger': 'focus'}

def test_to_json():
    """Tests JSON rendering."""
    tip = Tooltip({'trigger': 'focus', 'isHtml': True, 'textStyle': {'color': 'red'}})
    assert json.loads(tip.to_json()) == {'trigger': 'focus', 'isHtml': True,
                                         'textStyle': {'color': 'red'}}
