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


"""JSON serialization for catalog entries.

An entry serializes to its SPDX identifier and deserializes by
resolving that identifier against a catalog, so the wire form of
``MIT`` is simply ``"MIT"``::

    >>> dumps(parse_license('MIT'))
    '"MIT"'
    >>> load_license('"mit"')
    License('MIT')

:func:`entry_to_dict` gives the full record instead, for reports and
the ``licensekit show --json`` command.
"""

from __future__ import annotations

import json
from dataclasses import fields
from typing import Any

from licensekit._types import License, LicenseException
from licensekit.catalog import Catalog, default_catalog
from licensekit.ext import ExtendedLicense

__all__ = [
    'dumps',
    'entry_to_dict',
    'load_exception',
    'load_license',
    'to_json_value',
]

_FACT_FIELDS = frozenset({'permissions', 'conditions', 'limitations'})


def to_json_value(entry: License | LicenseException) -> str:
    """Return the JSON-compatible value for *entry*: its identifier."""
    return entry.id


def dumps(entry: License | LicenseException) -> str:
    """Serialize *entry* to a JSON string literal."""
    return json.dumps(to_json_value(entry))


def _decode_id(value: str | bytes, expecting: str) -> str:
    """Decode a JSON document that must hold a single string."""
    decoded = json.loads(value)
    if not isinstance(decoded, str):
        raise TypeError(f'expected {expecting}, got JSON {type(decoded).__name__}')
    return decoded


def load_license(value: str | bytes, catalog: Catalog | None = None) -> License:
    """Deserialize a JSON string literal into the license it names.

    Args:
        value: JSON text such as ``'"Apache-2.0"'``.
        catalog: Catalog to resolve against; defaults to the
            process-wide one.

    Raises:
        json.JSONDecodeError: If *value* is not valid JSON.
        TypeError: If the JSON value is not a string.
        NotFoundError: If the string is not a license id.
    """
    identifier = _decode_id(value, 'an SPDX license id')
    return (catalog or default_catalog()).license(identifier)


def load_exception(value: str | bytes, catalog: Catalog | None = None) -> LicenseException:
    """Deserialize a JSON string literal into the exception it names.

    Raises:
        json.JSONDecodeError: If *value* is not valid JSON.
        TypeError: If the JSON value is not a string.
        NotFoundError: If the string is not an exception id.
    """
    identifier = _decode_id(value, 'an SPDX license exception id')
    return (catalog or default_catalog()).exception(identifier)


def entry_to_dict(entry: License | LicenseException, *, include_text: bool = True) -> dict[str, Any]:
    """Return every field of *entry* as JSON-compatible data.

    ``see_also`` becomes a list.  Extended licenses add a ``facts``
    mapping of group name to the fact names that hold.

    Args:
        entry: The record to convert.
        include_text: Set to ``False`` to leave out the (long) text.
    """
    result: dict[str, Any] = {}
    for f in fields(entry):
        if f.name in _FACT_FIELDS or (f.name == 'text' and not include_text):
            continue
        value = getattr(entry, f.name)
        result[f.name] = list(value) if isinstance(value, tuple) else value
    if isinstance(entry, ExtendedLicense):
        result['facts'] = {
            'permissions': list(entry.permissions.facts()),
            'conditions': list(entry.conditions.facts()),
            'limitations': list(entry.limitations.facts()),
        }
    return result
