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


"""Integration tests that verify the bundled catalog against upstream SPDX data.

These tests require internet access and are **deselected by default**.
Run them explicitly with::

    pytest -m network tests/lk_catalog_data_integ_test.py

They fetch the latest data from the SPDX license-list-data repository
(github.com/spdx/license-list-data).
"""

from __future__ import annotations

import json
import socket
import urllib.request
from typing import Any

import pytest
from licensekit import Catalog, default_catalog

# ── Markers ─────────────────────────────────────────────────────────────

pytestmark = pytest.mark.network

# ── Constants ───────────────────────────────────────────────────────────

SPDX_LICENSES_URL = 'https://raw.githubusercontent.com/spdx/license-list-data/main/json/licenses.json'

SPDX_EXCEPTIONS_URL = 'https://raw.githubusercontent.com/spdx/license-list-data/main/json/exceptions.json'

# ── Helpers ─────────────────────────────────────────────────────────────


def _has_internet(host: str = '8.8.8.8', port: int = 53, timeout: float = 3) -> bool:
    """Return True if we can reach the internet."""
    try:
        socket.setdefaulttimeout(timeout)
        socket.socket(socket.AF_INET, socket.SOCK_STREAM).connect((host, port))
        return True
    except OSError:
        return False


def _fetch(url: str) -> bytes:
    """Fetch *url* and return raw bytes.  Only https:// is allowed."""
    if not url.startswith('https://'):
        msg = f'Only https:// URLs are allowed, got: {url}'
        raise ValueError(msg)
    with urllib.request.urlopen(url, timeout=30) as resp:  # noqa: S310
        return resp.read()


# ── Skip if offline ─────────────────────────────────────────────────────

if not _has_internet():
    pytest.skip('No internet access', allow_module_level=True)

# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture(scope='module')
def catalog() -> Catalog:
    """Return the bundled catalog."""
    return default_catalog()


@pytest.fixture(scope='module')
def spdx_licenses() -> dict[str, dict[str, Any]]:
    """Fetch the SPDX license list and return {id: entry}."""
    data = json.loads(_fetch(SPDX_LICENSES_URL))
    return {lic['licenseId']: lic for lic in data['licenses']}


@pytest.fixture(scope='module')
def spdx_exceptions() -> dict[str, dict[str, Any]]:
    """Fetch the SPDX exceptions list and return {id: entry}."""
    data = json.loads(_fetch(SPDX_EXCEPTIONS_URL))
    return {exc['licenseExceptionId']: exc for exc in data['exceptions']}


# ── License tests ───────────────────────────────────────────────────────


class TestLicenseCompliance:
    """Verify the bundled licenses against the SPDX license list."""

    def test_all_ids_are_valid(self, catalog: Catalog, spdx_licenses: dict[str, dict[str, Any]]) -> None:
        """Every bundled license id must exist in the official list."""
        missing = [lic.id for lic in catalog.licenses() if lic.id not in spdx_licenses]
        assert not missing, f'SPDX IDs not found in official list: {missing}'

    def test_names_match(self, catalog: Catalog, spdx_licenses: dict[str, dict[str, Any]]) -> None:
        """Full names must match the SPDX-provided value."""
        mismatches: list[str] = []
        for lic in catalog.licenses():
            theirs = spdx_licenses.get(lic.id, {}).get('name')
            if theirs is not None and lic.name != theirs:
                mismatches.append(f'{lic.id}: ours={lic.name!r}, SPDX={theirs!r}')
        assert not mismatches, 'name mismatches:\n' + '\n'.join(mismatches)

    def test_osi_approved_matches(self, catalog: Catalog, spdx_licenses: dict[str, dict[str, Any]]) -> None:
        """is_osi_approved must match the SPDX-provided value."""
        mismatches: list[str] = []
        for lic in catalog.licenses():
            if lic.id not in spdx_licenses:
                continue
            theirs = spdx_licenses[lic.id].get('isOsiApproved', False)
            if lic.is_osi_approved != theirs:
                mismatches.append(f'{lic.id}: ours={lic.is_osi_approved}, SPDX={theirs}')
        assert not mismatches, 'osi_approved mismatches:\n' + '\n'.join(mismatches)

    def test_deprecated_matches(self, catalog: Catalog, spdx_licenses: dict[str, dict[str, Any]]) -> None:
        """is_deprecated must match the SPDX-provided value."""
        mismatches: list[str] = []
        for lic in catalog.licenses():
            if lic.id not in spdx_licenses:
                continue
            theirs = spdx_licenses[lic.id].get('isDeprecatedLicenseId', False)
            if lic.is_deprecated != theirs:
                mismatches.append(f'{lic.id}: ours={lic.is_deprecated}, SPDX={theirs}')
        assert not mismatches, 'deprecated mismatches:\n' + '\n'.join(mismatches)


# ── Exception tests ─────────────────────────────────────────────────────


class TestExceptionCompliance:
    """Verify the bundled exceptions against the SPDX exceptions list."""

    def test_all_ids_are_valid(self, catalog: Catalog, spdx_exceptions: dict[str, dict[str, Any]]) -> None:
        """Every bundled exception id must exist in the official list."""
        missing = [exc.id for exc in catalog.exceptions() if exc.id not in spdx_exceptions]
        assert not missing, f'Exception IDs not found in official list: {missing}'

    def test_deprecated_matches(self, catalog: Catalog, spdx_exceptions: dict[str, dict[str, Any]]) -> None:
        """is_deprecated must match the SPDX-provided value."""
        mismatches: list[str] = []
        for exc in catalog.exceptions():
            if exc.id not in spdx_exceptions:
                continue
            theirs = spdx_exceptions[exc.id].get('isDeprecatedLicenseId', False)
            if exc.is_deprecated != theirs:
                mismatches.append(f'{exc.id}: ours={exc.is_deprecated}, SPDX={theirs}')
        assert not mismatches, 'deprecated mismatches:\n' + '\n'.join(mismatches)
