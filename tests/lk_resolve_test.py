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


"""Tests for identifier resolution against the bundled catalog."""

from __future__ import annotations

import pytest
from licensekit import (
    Catalog,
    ExceptionLike,
    LicenseLike,
    NotFoundError,
    default_catalog,
    parse_exception,
    parse_license,
)


@pytest.fixture()
def catalog() -> Catalog:
    """Return the process-wide catalog."""
    return default_catalog()


# ── Licenses ─────────────────────────────────────────────────────────


class TestParseLicense:
    """Tests for parse_license() and Catalog.license()."""

    def test_apache(self) -> None:
        """Apache-2.0 resolves with its published metadata."""
        lic = parse_license('Apache-2.0')
        assert lic.id == 'Apache-2.0'
        assert lic.name == 'Apache License 2.0'
        assert lic.is_osi_approved is True
        assert lic.is_deprecated is False
        assert lic.header is not None
        assert 'Apache License' in lic.text

    def test_mit(self) -> None:
        """MIT resolves and carries a text."""
        lic = parse_license('MIT')
        assert lic.name == 'MIT License'
        assert 'Permission is hereby granted' in lic.text

    def test_unknown_raises(self) -> None:
        """An id outside the catalog raises NotFoundError."""
        with pytest.raises(NotFoundError) as excinfo:
            parse_license('Not-A-Real-License')
        assert excinfo.value.identifier == 'Not-A-Real-License'
        assert excinfo.value.kind == 'license'
        assert 'SPDX license id not found' in str(excinfo.value)

    def test_not_found_is_lookup_error(self) -> None:
        """NotFoundError can be caught as LookupError."""
        with pytest.raises(LookupError):
            parse_license('Not-A-Real-License')

    def test_empty_string_raises(self) -> None:
        """The empty string never resolves."""
        with pytest.raises(NotFoundError):
            parse_license('')

    def test_deterministic(self) -> None:
        """Resolving twice returns the same entry."""
        assert parse_license('BSD-3-Clause') is parse_license('BSD-3-Clause')

    def test_deprecated_id_resolves(self) -> None:
        """Deprecated ids are ordinary entries flagged deprecated."""
        lic = parse_license('GPL-2.0')
        assert lic.id == 'GPL-2.0'
        assert lic.is_deprecated is True
        assert parse_license('GPL-2.0-only').is_deprecated is False

    def test_plus_suffix_is_part_of_id(self) -> None:
        """'+' ids are distinct catalog entries."""
        assert parse_license('GPL-2.0+').id == 'GPL-2.0+'
        assert parse_license('GPL-2.0+') is not parse_license('GPL-2.0')

    def test_full_list_bundled(self, catalog: Catalog) -> None:
        """The catalog ships the whole SPDX list, not a curated subset."""
        assert catalog.license_count >= 500

    @pytest.mark.parametrize(
        ('given', 'name'),
        [
            ('EPL-2.0', 'Eclipse Public License 2.0'),
            ('CC-BY-4.0', 'Creative Commons Attribution 4.0 International'),
            ('OFL-1.1', 'SIL Open Font License 1.1'),
            ('Artistic-2.0', 'Artistic License 2.0'),
            ('Python-2.0', 'Python License 2.0'),
            ('EUPL-1.2', 'European Union Public License 1.2'),
            ('MPL-1.0', 'Mozilla Public License 1.0'),
        ],
    )
    def test_common_ids_resolve(self, given: str, name: str) -> None:
        """Widely used ids outside the curated set resolve with text."""
        lic = parse_license(given)
        assert lic.id == given
        assert lic.name == name
        assert lic.text.strip()

    def test_every_license_resolves_to_itself(self, catalog: Catalog) -> None:
        """Each listed license resolves back to the identical entry."""
        for lic in catalog.licenses():
            assert parse_license(lic.id) is lic

    def test_every_license_satisfies_protocol(self, catalog: Catalog) -> None:
        """Accessors are total for every license."""
        for lic in catalog.licenses():
            assert isinstance(lic, LicenseLike)
            assert lic.id
            assert lic.name
            assert lic.text.strip()
            assert isinstance(lic.see_also, tuple)


# ── Matching policy ──────────────────────────────────────────────────


class TestMatchingPolicy:
    """Tests for the case-insensitive, otherwise exact, matching policy."""

    @pytest.mark.parametrize('given', ['mit', 'MIT', 'Mit', 'mIT'])
    def test_case_insensitive(self, given: str) -> None:
        """Any casing resolves to the canonical id."""
        assert parse_license(given).id == 'MIT'

    def test_canonical_id_for_mixed_case_id(self) -> None:
        """Mixed-case ids keep their published casing."""
        assert parse_license('ZLIB').id == 'Zlib'

    @pytest.mark.parametrize('given', [' MIT', 'MIT ', 'MIT\n', 'M.I.T', 'MIT-License', 'Apache 2.0'])
    def test_no_normalization(self, given: str) -> None:
        """Whitespace and punctuation are not normalized."""
        with pytest.raises(NotFoundError):
            parse_license(given)

    def test_find_license(self, catalog: Catalog) -> None:
        """find_license returns None instead of raising."""
        assert catalog.find_license('apache-2.0') is parse_license('Apache-2.0')
        assert catalog.find_license('Nope-1.0') is None

    def test_has_license(self, catalog: Catalog) -> None:
        """has_license answers without raising."""
        assert catalog.has_license('0bsd')
        assert not catalog.has_license('LLVM-exception')

    def test_exception_id_is_not_a_license(self) -> None:
        """Licenses and exceptions live in separate tables."""
        with pytest.raises(NotFoundError):
            parse_license('Classpath-exception-2.0')


# ── Exceptions ───────────────────────────────────────────────────────


class TestParseException:
    """Tests for parse_exception() and Catalog.exception()."""

    def test_llvm(self) -> None:
        """LLVM-exception resolves."""
        exc = parse_exception('LLVM-exception')
        assert exc.id == 'LLVM-exception'
        assert exc.name == 'LLVM Exception'
        assert exc.text.strip()

    def test_case_insensitive(self) -> None:
        """Exceptions follow the same matching policy."""
        assert parse_exception('classpath-exception-2.0').id == 'Classpath-exception-2.0'

    def test_unknown_raises(self) -> None:
        """Unknown exception ids raise with kind 'exception'."""
        with pytest.raises(NotFoundError) as excinfo:
            parse_exception('MIT')
        assert excinfo.value.kind == 'exception'
        assert 'SPDX exception id not found' in str(excinfo.value)

    def test_deprecated_exception(self) -> None:
        """Deprecated exceptions resolve and are flagged."""
        assert parse_exception('Nokia-Qt-exception-1.1').is_deprecated is True

    def test_empty_see_also(self) -> None:
        """see_also may be empty."""
        assert parse_exception('u-boot-exception-2.0').see_also == ()

    def test_full_list_bundled(self, catalog: Catalog) -> None:
        """Exceptions outside the curated set resolve too."""
        assert catalog.exception_count >= 40
        assert parse_exception('gpl-3.0-linking-exception').name == 'GPL-3.0 Linking Exception'

    def test_every_exception_resolves_to_itself(self, catalog: Catalog) -> None:
        """Each listed exception resolves back to the identical entry."""
        for exc in catalog.exceptions():
            assert isinstance(exc, ExceptionLike)
            assert parse_exception(exc.id) is exc

    def test_find_and_has_exception(self, catalog: Catalog) -> None:
        """Non-raising exception lookups."""
        assert catalog.has_exception('gcc-exception-3.1')
        assert catalog.find_exception('Nope-exception') is None
