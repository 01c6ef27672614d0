# SPDX-FileCopyrightText: 2026-present The Lavacharts Options Authors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: lavacharts-options
# FILE:           tests/conftest.py
# DESCRIPTION:    Shared pytest fixtures
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

from __future__ import annotations

from configparser import ConfigParser, ExtendedInterpolation

import pytest
from google.protobuf.struct_pb2 import Struct as StructProto

from lavacharts.options.logging import logging_manager


@pytest.fixture
def proto() -> StructProto:
    """Returns empty protobuf Struct message.
    """
    return StructProto()

@pytest.fixture
def base_conf() -> ConfigParser:
    """Returns configparser with `ExtendedInterpolation`.
    """
    return ConfigParser(interpolation=ExtendedInterpolation())

@pytest.fixture(autouse=True)
def reset_logging():
    """Resets the global logging manager after each test.
    """
    yield
    logging_manager.reset()
