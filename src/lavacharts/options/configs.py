# SPDX-FileCopyrightText: 2026-present The Lavacharts Options Authors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: lavacharts-options
# FILE:           src/lavacharts/options/configs.py
# DESCRIPTION:    Option bags for chart elements
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

"""Lavacharts Options - Option bags for chart elements

Option bags for text style, axes and legend. All options can be set either by passing a
mapping with option: value items to the constructor, or by chaining setter calls once an
object has been created.

Example::

    from lavacharts.options.configs import HorizontalAxis, Legend, TextStyle

    legend = Legend({'position': 'bottom', 'alignment': 'center'})
    haxis = (HorizontalAxis()
             .text_style(TextStyle({'fontSize': 12}))
             .text_position('out')
             .slanted_text(True)
             .slanted_text_angle(45)
             .min_text_spacing())
    print(haxis.get_values())
    # Output: {'textStyle': {'fontSize': 12}, 'textPosition': 'out', 'slantedText': True,
    #          'slantedTextAngle': 45, 'minTextSpacing': 12}
"""

from __future__ import annotations

from typing import Any, ClassVar, Self

from .config import ConfigOptions, option
from .helpers import is_int, is_non_empty_str
from .logging import BraceMessage
from .types import Label

#: Allowed values of `Axis.textPosition`.
TEXT_POSITIONS: list[str] = ['out', 'in', 'none']
#: Allowed values of `Axis.direction`.
DIRECTIONS: list[int] = [1, -1]
#: Allowed values of `Axis.viewWindowMode`.
VIEW_WINDOW_MODES: list[str] = ['pretty', 'maximized', 'explicit']
#: Allowed values of `Legend.position`.
LEGEND_POSITIONS: list[str] = ['right', 'top', 'bottom', 'in', 'none']
#: Allowed values of `Legend.alignment`.
LEGEND_ALIGNMENTS: list[str] = ['start', 'center', 'end']

class TextStyle(ConfigOptions):
    """Text style options, used by axis labels, titles and legend.
    """
    #: Style kind marker.
    style_kind: ClassVar[str] = 'text'
    @option('color', str)
    def color(self, color: str) -> Self:
        """Sets text color, e.g. 'red' or '#00cc00'.
        """
        return self._set_str('color', color)
    @option('fontName', str)
    def font_name(self, font_name: str) -> Self:
        """Sets font face name.
        """
        return self._set_str('fontName', font_name)
    @option('fontSize', int)
    def font_size(self, font_size: int) -> Self:
        """Sets font size in pixels.
        """
        return self._set_int('fontSize', font_size, 1)
    @option('bold', bool)
    def bold(self, bold: bool) -> Self:
        return self._set_bool('bold', bold)
    @option('italic', bool)
    def italic(self, italic: bool) -> Self:
        return self._set_bool('italic', italic)

class Axis(ConfigOptions):
    """Options shared by horizontal and vertical axes.
    """
    @option('baselineColor', str)
    def baseline_color(self, color: str) -> Self:
        """Sets color of the baseline for the axis.
        """
        return self._set_str('baselineColor', color)
    @option('direction', int)
    def direction(self, direction: int) -> Self:
        """Sets the direction in which the values along the axis grow.

        Specify -1 to reverse the order of the values.
        """
        return self._set_enum('direction', direction, DIRECTIONS)
    @option('format', str)
    def format(self, fmt: str) -> Self:
        """Sets format string for numeric or date axis labels, e.g. '#,###%'.
        """
        return self._set_str('format', fmt)
    @option('logScale', bool)
    def log_scale(self, log_scale: bool) -> Self:
        """Sets whether the axis uses logarithmic scale.
        """
        return self._set_bool('logScale', log_scale)
    @option('maxValue', float)
    def max_value(self, value: int | float) -> Self:
        return self._set_number('maxValue', value)
    @option('minValue', float)
    def min_value(self, value: int | float) -> Self:
        return self._set_number('minValue', value)
    @option('textPosition', str)
    def text_position(self, position: str) -> Self:
        """Sets position of the axis text, relative to the chart area.
        """
        return self._set_enum('textPosition', position, TEXT_POSITIONS)
    @option('textStyle', TextStyle)
    def text_style(self, style: TextStyle) -> Self:
        """Sets style of the axis text. Accepts `TextStyle` or mapping with its options.
        """
        return self._set_style('textStyle', style, 'text')
    @option('title', str)
    def title(self, title: str) -> Self:
        """Sets axis title. The title is stored as `.Label`.

        Raises:
            InvalidConfigValue: When title is not a string, or it is empty.
        """
        if not is_non_empty_str(title):
            raise self.invalid_value('title', 'string', 'that is not empty')
        return self._set('title', Label(title))
    @option('titleTextStyle', TextStyle)
    def title_text_style(self, style: TextStyle) -> Self:
        """Sets style of the axis title. Accepts `TextStyle` or mapping with its options.
        """
        return self._set_style('titleTextStyle', style, 'text')
    @option('viewWindowMode', str)
    def view_window_mode(self, mode: str) -> Self:
        """Sets how to scale the axis to render the values within the chart area.
        """
        return self._set_enum('viewWindowMode', mode, VIEW_WINDOW_MODES)

class HorizontalAxis(Axis):
    """Horizontal axis options.

    Options specific to horizontal axis are supported only for a discrete axis.
    """
    @option('allowContainerBoundaryTextCutoff', bool)
    def allow_container_boundary_text_cutoff(self, cutoff: bool) -> Self:
        """Sets whether the container can cutoff the labels.

        If False, outermost labels are hidden rather than cropped by the chart container.
        """
        return self._set_bool('allowContainerBoundaryTextCutoff', cutoff)
    @option('slantedText', bool)
    def slanted_text(self, slant: bool) -> Self:
        """Sets whether the labels are drawn at an angle.

        Available only when `textPosition` was set to 'out' before.
        """
        if isinstance(slant, bool) and self.get_value('textPosition') == 'out':
            return self._set('slantedText', slant)
        raise self.invalid_value('slantedText', 'boolean', 'and textPosition must be "out"')
    @option('slantedTextAngle', int)
    def slanted_text_angle(self, angle: int) -> Self:
        """Sets the angle of slanted labels.
        """
        return self._set_int('slantedTextAngle', angle, 1, 90)
    @option('maxAlternation', int)
    def max_alternation(self, alternation: int) -> Self:
        """Sets maximum number of levels of axis text.
        """
        return self._set_int('maxAlternation', alternation)
    @option('maxTextLines', int)
    def max_text_lines(self, lines: int) -> Self:
        """Sets maximum number of lines allowed for the text labels.
        """
        return self._set_int('maxTextLines', lines)
    @option('minTextSpacing', int)
    def min_text_spacing(self, spacing: Any=None) -> Self:
        """Sets minimum spacing, in pixels, allowed between two adjacent text labels.

        When `spacing` is not an int, the `fontSize` of already set `textStyle` is used.

        Raises:
            InvalidConfigValue: When `spacing` is not an int and there is no `textStyle`
                                with `fontSize`.
        """
        if is_int(spacing):
            return self._set('minTextSpacing', spacing)
        style = self.get_value('textStyle')
        if style is not None and (font_size := style.get_values().get('fontSize')) is not None:
            self._logger.debug(BraceMessage("{0}.minTextSpacing taken from textStyle fontSize {1}",
                                            self.__class__.__name__, font_size))
            return self._set('minTextSpacing', font_size)
        raise self.invalid_value('minTextSpacing', 'int', "or set via textStyle['fontSize']")
    @option('showTextEvery', int)
    def show_text_every(self, every: int) -> Self:
        """Sets how many axis labels to show, 1 means every label, 2 every other label etc.
        """
        return self._set_int('showTextEvery', every)

class VerticalAxis(Axis):
    """Vertical axis options.
    """

class Legend(ConfigOptions):
    """Legend options.
    """
    @option('position', str)
    def position(self, position: str) -> Self:
        """Sets position of the legend.

        'right'  - To the right of the chart.
        'top'    - Above the chart.
        'bottom' - Below the chart.
        'in'     - Inside the chart, by the top left corner.
        'none'   - No legend is displayed.
        """
        return self._set_enum('position', position, LEGEND_POSITIONS)
    @option('alignment', str)
    def alignment(self, alignment: str) -> Self:
        """Sets alignment of the legend within the area allocated for it: 'start', 'center'
        or 'end'.
        """
        return self._set_enum('alignment', alignment, LEGEND_ALIGNMENTS)
    @option('textStyle', TextStyle)
    def text_style(self, style: TextStyle) -> Self:
        """Sets legend text style. Accepts `TextStyle` or mapping with its options.
        """
        return self._set_style('textStyle', style, 'text')
