# SPDX-FileCopyrightText: 2026-present The Lavacharts Options Authors
#
# SPDX-License-Identifier: MIT
#
# PROGRAM/MODULE: lavacharts-options
# FILE:           src/lavacharts/options/logging.py
# DESCRIPTION:    Context-based logging
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

"""Lavacharts Options - Context-based logging

Thin layer over standard `logging` module. Loggers are obtained for an *agent* (any
object or string) and an optional *topic*, and the resulting `ContextLoggerAdapter`
adds `domain`, `topic`, `agent` and `context` attributes to every `logging.LogRecord`.

The name of underlying `logging.Logger` is built from `LoggingManager.logger_fmt`,
which by default is ``['lavacharts', DOMAIN, TOPIC]``, so option bags that log under
topic 'options' use the "lavacharts.options" logger unless mapped to some domain.

Example::

    from lavacharts.options.logging import get_logger, set_domain_mapping

    set_domain_mapping('axis', ['lavacharts.options.configs.HorizontalAxis'])
    log = get_logger(HorizontalAxis(), 'options')
    log.debug("Hello")  # Logged via "lavacharts.axis.options" logger
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from enum import Enum
from typing import Any


class FormatElement(Enum):
    """Placeholders used within `LoggingManager.logger_fmt` list."""
    DOMAIN = 1
    TOPIC = 2

#: Placeholder for domain name in `LoggingManager.logger_fmt`.
DOMAIN: FormatElement = FormatElement.DOMAIN
#: Placeholder for topic name in `LoggingManager.logger_fmt`.
TOPIC: FormatElement = FormatElement.TOPIC

class BraceMessage:
    """Lazy logging message using `str.format` style formatting.

    The message is formatted only when a handler actually emits the record.

    Example::

        log.debug(BraceMessage("Option {0} set to {1!r}", 'position', 'top'))
    """
    def __init__(self, fmt: str, /, *args, **kwargs):
        self.fmt: str = fmt
        self.args: tuple[Any, ...] = args
        self.kwargs: dict[str, Any] = kwargs
    def __str__(self) -> str:
        return self.fmt.format(*self.args, **self.kwargs)

class ContextFilter(logging.Filter):
    """Logging filter that adds missing `domain`, `topic`, `agent` and `context`
    attributes (with `None` value) to log records, so formatters could use them
    for records that don't come from `ContextLoggerAdapter`.
    """
    def filter(self, record) -> bool:
        for attr in ('domain', 'topic', 'agent', 'context'):
            if not hasattr(record, attr):
                setattr(record, attr, None)
        return True

class ContextLoggerAdapter(logging.LoggerAdapter):
    """Logger adapter that adds context information into `extra` of every call.

    Arguments:
        logger: Adapted `logging.Logger`.
        domain: Domain name or None.
        topic: Topic name or None.
        agent: Agent object or name passed to `get_logger`.
        agent_name: Agent name.
    """
    def __init__(self, logger: logging.Logger, domain: str | None, topic: str | None,
                 agent: Any, agent_name: str):
        self.agent = agent
        super().__init__(logger, {'domain': domain, 'topic': topic, 'agent': agent_name})
    def process(self, msg: Any, kwargs: dict[str, Any]) -> tuple[Any, dict[str, Any]]:
        """Inserts context information into `extra` keyword argument. The `context`
        value is taken from `agent.log_context` when agent has it.
        """
        if 'context' not in self.extra:
            self.extra['context'] = getattr(self.agent, 'log_context', None)
        kwargs['extra'] = dict(self.extra, **kwargs['extra']) if 'extra' in kwargs else self.extra
        return msg, kwargs

class LoggingManager:
    """Logging manager.

    Maps agents to domains and builds names of `logging.Logger` instances.
    """
    #: Default logger name format.
    DEFAULT_FMT: tuple[str | FormatElement, ...] = ('lavacharts', DOMAIN, TOPIC)
    def __init__(self):
        self._agent_domain_map: dict[str, str] = {}
        self._agent_map: dict[str, str] = {}
        self.__logger_fmt: list[str | FormatElement] = list(self.DEFAULT_FMT)
        self.__default_domain: str | None = None
        self._logger_factory: Callable[[str], logging.Logger] = logging.getLogger
    def reset(self) -> None:
        """Resets manager to defaults: no mappings, default `logger_fmt` and undefined
        `default_domain`.
        """
        self._agent_domain_map.clear()
        self._agent_map.clear()
        self.__logger_fmt = list(self.DEFAULT_FMT)
        self.__default_domain = None
    def _get_logger_name(self, domain: str | None, topic: str | None) -> str:
        result = []
        for item in self.logger_fmt:
            if item is DOMAIN:
                if domain:
                    result.append(domain)
            elif item is TOPIC:
                if topic:
                    result.append(topic)
            else:
                result.append(item)
        return '.'.join(result)
    def get_agent_name(self, agent: Any) -> str:
        """Returns name for agent.

        Strings are used as they are. For other objects, the `_agent_name_` attribute is
        used when defined, otherwise the name is `module.ClassQualname`. Names are then
        translated through agent mapping (see `set_agent_mapping`).
        """
        agent_name: Any = agent
        if not isinstance(agent, str):
            if not (agent_name := getattr(agent, '_agent_name_', None)):
                agent_name = f'{agent.__class__.__module__}.{agent.__class__.__qualname__}'
        return str(self._agent_map.get(agent_name, agent_name))
    def set_agent_mapping(self, agent: str, new_agent: str | None) -> None:
        """Sets or removes (when `new_agent` is None or empty) mapping of agent name to
        another name.
        """
        if new_agent:
            self._agent_map[agent] = str(new_agent)
        else:
            self._agent_map.pop(agent, None)
    def set_domain_mapping(self, domain: str, agents: Iterable[str] | str | None) -> None:
        """Assigns agents to domain.

        Arguments:
            domain: Domain name.
            agents: Agent name, iterable with agent names, or None to remove all agents
                    assigned to domain.
        """
        if agents is None:
            for agent in [a for a, d in self._agent_domain_map.items() if d == domain]:
                del self._agent_domain_map[agent]
            return
        for agent in ([agents] if isinstance(agents, str) else agents):
            self._agent_domain_map[agent] = domain
    def get_agent_domain(self, agent: str) -> str | None:
        """Returns domain assigned to agent, or None.
        """
        return self._agent_domain_map.get(agent)
    def get_logger(self, agent: Any, topic: str | None=None) -> ContextLoggerAdapter:
        """Returns `ContextLoggerAdapter` for agent and topic.

        Arguments:
            agent: Agent object or name.
            topic: Optional topic name.
        """
        agent_name = self.get_agent_name(agent)
        domain = self._agent_domain_map.get(agent_name, self.default_domain)
        logger = self._logger_factory(self._get_logger_name(domain, topic))
        return ContextLoggerAdapter(logger, domain, topic, agent, agent_name)
    @property
    def logger_fmt(self) -> list[str | FormatElement]:
        """Logger name format.

        List of strings and at most one `DOMAIN` and one `TOPIC` placeholder. Logger name
        is made by joining the elements with dots, with placeholders replaced by domain
        and topic names (or skipped when not defined). Empty strings are removed.
        """
        return self.__logger_fmt
    @logger_fmt.setter
    def logger_fmt(self, value: list[str | FormatElement]) -> None:
        result = []
        for item in value:
            if isinstance(item, FormatElement):
                if item in result:
                    raise ValueError(f"Only one occurence of {item.name} allowed")
                result.append(item)
            elif isinstance(item, str):
                if item:
                    result.append(item)
            else:
                raise ValueError(f"Unsupported item type {type(item)}")
        self.__logger_fmt = result
    @property
    def default_domain(self) -> str | None:
        """Domain used for agents without domain mapping.
        """
        return self.__default_domain
    @default_domain.setter
    def default_domain(self, value: str | None) -> None:
        self.__default_domain = None if value is None else str(value)

#: Logging manager.
logging_manager: LoggingManager = LoggingManager()
#: Shortcut to `.LoggingManager.get_logger` of global manager.
get_logger = logging_manager.get_logger
#: Shortcut to `.LoggingManager.get_agent_name` of global manager.
get_agent_name = logging_manager.get_agent_name
#: Shortcut to `.LoggingManager.set_domain_mapping` of global manager.
set_domain_mapping = logging_manager.set_domain_mapping
#: Shortcut to `.LoggingManager.set_agent_mapping` of global manager.
set_agent_mapping = logging_manager.set_agent_mapping
