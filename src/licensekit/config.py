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


"""Catalog configuration.

The catalog is read from a data directory laid out as::

    <data_dir>/
        licenses.toml
        exceptions.toml
        extensions.toml
        text/licenses/<id>.txt
        text/exceptions/<id>.txt

By default that is the snapshot bundled inside the package.  Point
``LICENSEKIT_DATA_DIR`` (or :func:`resolve_catalog_config`'s
``data_dir``) at another directory with the same layout to use a
different snapshot, e.g. one freshly produced by
``scripts/generate_catalog.py``.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, replace
from pathlib import Path

__all__ = [
    'BUNDLED_DATA_DIR',
    'CatalogConfig',
    'resolve_catalog_config',
]

BUNDLED_DATA_DIR = Path(__file__).resolve().parent / 'data'

_TRUTHY = ('1', 'true', 'yes')


@dataclass(frozen=True)
class CatalogConfig:
    """Where the catalog comes from and what gets loaded.

    Attributes:
        data_dir: Directory holding the TOML metadata and text payloads.
        load_extensions: Whether to apply ``extensions.toml``.  When
            ``False`` no license carries curated facts.
    """

    data_dir: Path = BUNDLED_DATA_DIR
    load_extensions: bool = True


def resolve_catalog_config(
    base: CatalogConfig | None = None,
    *,
    data_dir: Path | str | None = None,
    no_extensions: bool = False,
) -> CatalogConfig:
    """Merge explicit arguments and env vars into the final config.

    Priority order (highest wins):
    1. ``data_dir`` / ``no_extensions`` arguments
    2. ``LICENSEKIT_DATA_DIR`` env var
    3. ``LICENSEKIT_NO_EXTENSIONS`` env var (``1``, ``true`` or ``yes``)
    4. ``base`` (defaults to :class:`CatalogConfig`)

    Args:
        base: Starting configuration.
        data_dir: Data directory override.
        no_extensions: ``True`` to skip the extension overlay.

    Returns:
        Resolved :class:`CatalogConfig`.
    """
    base = base or CatalogConfig()
    resolved_dir = base.data_dir
    load_extensions = base.load_extensions

    # Layer 3: env var LICENSEKIT_NO_EXTENSIONS.
    env_no_ext = os.environ.get('LICENSEKIT_NO_EXTENSIONS', '').lower()
    if env_no_ext in _TRUTHY:
        load_extensions = False

    # Layer 2: env var LICENSEKIT_DATA_DIR.
    env_dir = os.environ.get('LICENSEKIT_DATA_DIR', '').strip()
    if env_dir:
        resolved_dir = Path(env_dir)

    # Layer 1: explicit arguments.
    if no_extensions:
        load_extensions = False
    if data_dir is not None:
        resolved_dir = Path(data_dir)

    return replace(base, data_dir=resolved_dir, load_extensions=load_extensions)
