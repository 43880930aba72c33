# Copyright 2026 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
#
# SPDX-License-Identifier: Apache-2.0


"""Structured logging for licensekit.

The library itself only emits a handful of events:

==========================  =======  ===================================
Event                       Level    Fields
==========================  =======  ===================================
``catalog_loaded``          debug    data_dir, licenses, exceptions,
                                     extended
``id_not_found``            debug    kind, identifier
``catalog_load_failed``     error    errors (CLI only)
==========================  =======  ===================================

Nothing is rendered until the application calls
:func:`configure_logging`; the ``licensekit`` command does so from its
``-v``/``-q``/``--json-log`` flags.  Output always goes to stderr so
``licensekit text MIT > LICENSE`` stays clean.
"""

from __future__ import annotations

import logging
import sys

import structlog

__all__ = [
    'configure_logging',
    'get_logger',
]

LOGGER_NAME = 'licensekit'


def _level(*, verbose: bool, quiet: bool) -> int:
    """Map the CLI verbosity flags to a stdlib level; quiet wins."""
    if quiet:
        return logging.WARNING
    if verbose:
        return logging.DEBUG
    return logging.INFO


def _renderer(*, json_log: bool) -> structlog.types.Processor:
    if json_log:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=sys.stderr.isatty())


def configure_logging(
    *,
    verbose: bool = False,
    quiet: bool = False,
    json_log: bool = False,
) -> None:
    """Route licensekit events through the stdlib root logger to stderr.

    Args:
        verbose: Show debug events such as ``id_not_found``.
        quiet: Only show warnings and errors.
        json_log: One JSON object per line instead of console output.
    """
    logging.basicConfig(
        format='%(message)s',
        stream=sys.stderr,
        level=_level(verbose=verbose, quiet=quiet),
        force=True,
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt='iso'),
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    formatter = structlog.stdlib.ProcessorFormatter(
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _renderer(json_log=json_log),
        ],
    )
    for handler in logging.root.handlers:
        handler.setFormatter(formatter)


def get_logger(name: str = LOGGER_NAME) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger; modules pass their ``__name__``."""
    return structlog.get_logger(name)
