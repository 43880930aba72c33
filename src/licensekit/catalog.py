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


"""The SPDX license catalog: loading, resolution and iteration.

The catalog is a pair of read-only tables, one for licenses and one for
license exceptions, built once from the data directory described in
:mod:`licensekit.config`.  Both tables keep the declaration order of
their TOML file.

Matching policy
===============

Identifiers are matched **case-insensitively** and nothing else:
``"mit"`` resolves to ``MIT``, but ``" MIT"``, ``"MIT "`` and ``"M.I.T"``
do not resolve at all.  The entry returned always carries its canonical
``id``.  Deprecated identifiers (``GPL-2.0``, ``LGPL-2.1+``, ...) are
ordinary entries flagged ``is_deprecated``; they resolve like any other.

Because lookups fold case, two identifiers of the same kind that differ
only in case would be ambiguous.  Such data is rejected when the
catalog is built.

Usage::

    from licensekit.catalog import default_catalog, parse_license

    lic = parse_license('Apache-2.0')
    lic.name  # 'Apache License 2.0'

    catalog = default_catalog()
    catalog.find_license('Not-A-License')  # None
    [lic.id for lic in catalog.licenses()][:3]  # ['0BSD', 'AFL-3.0', ...]
"""

from __future__ import annotations

import functools
import sys
from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any, TypeVar

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from licensekit._types import License, LicenseException
from licensekit.config import CatalogConfig, resolve_catalog_config
from licensekit.errors import CatalogDataError, EntryKind, NotFoundError
from licensekit.ext import Conditions, ExtendedLicense, Limitations, Permissions
from licensekit.logging import get_logger

__all__ = [
    'Catalog',
    'default_catalog',
    'exceptions',
    'from_id_ext',
    'licenses',
    'parse_exception',
    'parse_license',
]

logger = get_logger(__name__)

_LICENSES_TOML = 'licenses.toml'
_EXCEPTIONS_TOML = 'exceptions.toml'
_EXTENSIONS_TOML = 'extensions.toml'

_FACT_GROUPS: dict[str, type[Permissions] | type[Conditions] | type[Limitations]] = {
    'permissions': Permissions,
    'conditions': Conditions,
    'limitations': Limitations,
}

_E = TypeVar('_E', License, LicenseException)


def _fold(identifier: str) -> str:
    """Return the lookup key for *identifier*."""
    return identifier.lower()


class Catalog:
    """Read-only tables of SPDX licenses and license exceptions.

    Build one with :meth:`load` (from a data directory) or directly from
    entry objects.  After construction nothing is ever mutated, so a
    catalog can be shared freely between threads.

    Args:
        licenses: License entries in declaration order.
        exceptions: Exception entries in declaration order.

    Raises:
        CatalogDataError: If two identifiers of the same kind are equal
            ignoring case.
    """

    def __init__(
        self,
        licenses: Iterable[License] = (),
        exceptions: Iterable[LicenseException] = (),
    ) -> None:
        license_list = list(licenses)
        exception_list = list(exceptions)
        errors = _collisions('license', license_list) + _collisions('exception', exception_list)
        if errors:
            raise CatalogDataError(errors)
        self._licenses: dict[str, License] = {_fold(lic.id): lic for lic in license_list}
        self._exceptions: dict[str, LicenseException] = {_fold(exc.id): exc for exc in exception_list}

    def __repr__(self) -> str:
        """Return a summary with the entry counts."""
        return f'Catalog(licenses={self.license_count}, exceptions={self.exception_count})'

    # ── Loading ──────────────────────────────────────────────────────

    @classmethod
    def load(cls, config: CatalogConfig | None = None) -> Catalog:
        """Load a catalog from a data directory.

        Every problem found in the data is collected and reported in a
        single :class:`~licensekit.errors.CatalogDataError`.

        Args:
            config: Where to load from.  Defaults to
                :func:`~licensekit.config.resolve_catalog_config`.

        Returns:
            A fully constructed :class:`Catalog`.
        """
        config = config or resolve_catalog_config()
        data_dir = config.data_dir
        errors: list[str] = []

        # 1. Licenses and their texts.
        license_data = _read_toml(data_dir / _LICENSES_TOML, errors)
        license_list = _load_licenses(license_data, data_dir / 'text' / 'licenses', errors)

        # 2. Exceptions and their texts.
        exception_data = _read_toml(data_dir / _EXCEPTIONS_TOML, errors)
        exception_list = _load_exceptions(exception_data, data_dir / 'text' / 'exceptions', errors)

        # 3. Curated facts replace plain records with extended ones.
        if config.load_extensions:
            extension_data = _read_toml(data_dir / _EXTENSIONS_TOML, errors)
            license_list = _apply_extensions(extension_data, license_list, errors)

        # 4. Identifiers must stay unique under the matching policy.
        errors.extend(_collisions('license', license_list))
        errors.extend(_collisions('exception', exception_list))

        if errors:
            raise CatalogDataError(errors)

        catalog = cls(license_list, exception_list)
        logger.debug(
            'catalog_loaded',
            data_dir=str(data_dir),
            licenses=catalog.license_count,
            exceptions=catalog.exception_count,
            extended=sum(1 for _ in catalog.extended_licenses()),
        )
        return catalog

    # ── Resolution ───────────────────────────────────────────────────

    def license(self, identifier: str) -> License:
        """Return the license whose id matches *identifier*.

        Raises:
            NotFoundError: If no license matches.
        """
        lic = self._licenses.get(_fold(identifier))
        if lic is None:
            logger.debug('id_not_found', kind='license', identifier=identifier)
            raise NotFoundError('license', identifier)
        return lic

    def exception(self, identifier: str) -> LicenseException:
        """Return the license exception whose id matches *identifier*.

        Raises:
            NotFoundError: If no exception matches.
        """
        exc = self._exceptions.get(_fold(identifier))
        if exc is None:
            logger.debug('id_not_found', kind='exception', identifier=identifier)
            raise NotFoundError('exception', identifier)
        return exc

    def find_license(self, identifier: str) -> License | None:
        """Return the matching license, or ``None``."""
        return self._licenses.get(_fold(identifier))

    def find_exception(self, identifier: str) -> LicenseException | None:
        """Return the matching license exception, or ``None``."""
        return self._exceptions.get(_fold(identifier))

    def has_license(self, identifier: str) -> bool:
        """Return ``True`` if *identifier* names a license."""
        return _fold(identifier) in self._licenses

    def has_exception(self, identifier: str) -> bool:
        """Return ``True`` if *identifier* names a license exception."""
        return _fold(identifier) in self._exceptions

    def extension(self, license_or_id: License | str) -> ExtendedLicense | None:
        """Return the curated-facts view of a license, if it has one.

        Args:
            license_or_id: A license entry or an identifier.  Unknown
                identifiers give ``None`` rather than an error.

        Returns:
            The :class:`~licensekit.ext.ExtendedLicense`, or ``None``
            when the license's facts are not tracked.
        """
        identifier = license_or_id if isinstance(license_or_id, str) else license_or_id.id
        lic = self._licenses.get(_fold(identifier))
        return lic if isinstance(lic, ExtendedLicense) else None

    # ── Iteration ────────────────────────────────────────────────────

    def licenses(self) -> Iterator[License]:
        """Iterate over every license in declaration order."""
        return iter(tuple(self._licenses.values()))

    def exceptions(self) -> Iterator[LicenseException]:
        """Iterate over every license exception in declaration order."""
        return iter(tuple(self._exceptions.values()))

    def extended_licenses(self) -> Iterator[ExtendedLicense]:
        """Iterate over the licenses that carry curated facts."""
        return (lic for lic in tuple(self._licenses.values()) if isinstance(lic, ExtendedLicense))

    @property
    def license_count(self) -> int:
        """Number of licenses in the catalog."""
        return len(self._licenses)

    @property
    def exception_count(self) -> int:
        """Number of license exceptions in the catalog."""
        return len(self._exceptions)


# ── Data file parsing ────────────────────────────────────────────────


def _read_toml(path: Path, errors: list[str]) -> dict[str, Any]:
    """Parse *path*, recording a problem in *errors* instead of raising."""
    if not path.is_file():
        errors.append(f'{path}: file not found')
        return {}
    try:
        with path.open('rb') as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as exc:
        errors.append(f'{path}: invalid TOML: {exc}')
        return {}


def _read_text(path: Path, where: str, errors: list[str]) -> str:
    """Read a text payload; it must exist and must not be blank."""
    if not path.is_file():
        errors.append(f'{where}: missing text file {path}')
        return ''
    try:
        text = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as exc:
        errors.append(f'{where}: cannot read text file {path}: {exc}')
        return ''
    if not text.strip():
        errors.append(f'{where}: text file {path} is empty')
    return text


def _check_common(where: str, entry_id: str, info: dict[str, Any], errors: list[str]) -> bool:
    """Validate the fields every entry kind shares.

    Returns:
        ``True`` if the entry is usable.
    """
    start = len(errors)
    if not entry_id:
        errors.append(f'{where}: identifier must not be empty')
    name = info.get('name')
    if name is None:
        errors.append(f'{where}: missing required field "name"')
    elif not isinstance(name, str):
        errors.append(f'{where}.name: expected string, got {type(name).__name__}')
    elif not name.strip():
        errors.append(f'{where}.name: must not be empty')
    if 'deprecated' in info and not isinstance(info['deprecated'], bool):
        errors.append(f'{where}.deprecated: expected bool, got {type(info["deprecated"]).__name__}')
    comments = info.get('comments')
    if comments is not None and not isinstance(comments, str):
        errors.append(f'{where}.comments: expected string, got {type(comments).__name__}')
    see_also = info.get('see_also', [])
    if not isinstance(see_also, list):
        errors.append(f'{where}.see_also: expected list, got {type(see_also).__name__}')
    elif not all(isinstance(url, str) for url in see_also):
        errors.append(f'{where}.see_also: all entries must be strings')
    return len(errors) == start


def _load_licenses(data: dict[str, Any], text_dir: Path, errors: list[str]) -> list[License]:
    """Build :class:`License` records from ``licenses.toml`` data."""
    result: list[License] = []
    for spdx_id, info in data.items():
        where = f'licenses[{spdx_id}]'
        if not isinstance(info, dict):
            errors.append(f'{where}: expected a table, got {type(info).__name__}')
            continue
        ok = _check_common(where, spdx_id, info, errors)
        for flag in ('osi_approved', 'fsf_libre'):
            if flag in info and not isinstance(info[flag], bool):
                errors.append(f'{where}.{flag}: expected bool, got {type(info[flag]).__name__}')
                ok = False
        header = info.get('header')
        if header is not None and not isinstance(header, str):
            errors.append(f'{where}.header: expected string, got {type(header).__name__}')
            ok = False
        text = _read_text(text_dir / f'{spdx_id}.txt', where, errors) if spdx_id else ''
        if not ok or not text.strip():
            continue
        result.append(
            License(
                id=spdx_id,
                name=info['name'],
                text=text,
                header=header or None,
                is_osi_approved=info.get('osi_approved', False),
                is_fsf_libre=info.get('fsf_libre', False),
                is_deprecated=info.get('deprecated', False),
                comments=info.get('comments') or None,
                see_also=tuple(info.get('see_also', ())),
            )
        )
    return result


def _load_exceptions(data: dict[str, Any], text_dir: Path, errors: list[str]) -> list[LicenseException]:
    """Build :class:`LicenseException` records from ``exceptions.toml`` data."""
    result: list[LicenseException] = []
    for exc_id, info in data.items():
        where = f'exceptions[{exc_id}]'
        if not isinstance(info, dict):
            errors.append(f'{where}: expected a table, got {type(info).__name__}')
            continue
        ok = _check_common(where, exc_id, info, errors)
        text = _read_text(text_dir / f'{exc_id}.txt', where, errors) if exc_id else ''
        if not ok or not text.strip():
            continue
        result.append(
            LicenseException(
                id=exc_id,
                name=info['name'],
                text=text,
                is_deprecated=info.get('deprecated', False),
                comments=info.get('comments') or None,
                see_also=tuple(info.get('see_also', ())),
            )
        )
    return result


def _apply_extensions(data: dict[str, Any], license_list: list[License], errors: list[str]) -> list[License]:
    """Swap in :class:`ExtendedLicense` records for curated licenses.

    Keys in ``extensions.toml`` must be license ids exactly as declared
    in ``licenses.toml``.
    """
    by_id = {lic.id: lic for lic in license_list}
    extended: dict[str, ExtendedLicense] = {}
    for spdx_id, info in data.items():
        where = f'extensions[{spdx_id}]'
        if not isinstance(info, dict):
            errors.append(f'{where}: expected a table, got {type(info).__name__}')
            continue
        base = by_id.get(spdx_id)
        if base is None:
            errors.append(f'{where}: unknown license id {spdx_id!r}')
            continue
        unknown_groups = sorted(set(info) - set(_FACT_GROUPS))
        if unknown_groups:
            errors.append(
                f'{where}: unknown fact group(s) {", ".join(unknown_groups)}; '
                f'expected: {", ".join(_FACT_GROUPS)}'
            )
            continue
        groups: dict[str, Any] = {}
        for group_name, group_cls in _FACT_GROUPS.items():
            names = info.get(group_name, [])
            if not isinstance(names, list) or not all(isinstance(n, str) for n in names):
                errors.append(f'{where}.{group_name}: expected a list of strings')
                continue
            try:
                groups[group_name] = group_cls.from_names(names)
            except ValueError as exc:
                errors.append(f'{where}.{group_name}: {exc}')
        if len(groups) == len(_FACT_GROUPS):
            extended[spdx_id] = ExtendedLicense.extend(base, **groups)
    return [extended.get(lic.id, lic) for lic in license_list]


def _collisions(kind: EntryKind, entries: list[_E]) -> list[str]:
    """Return one error per identifier that collides ignoring case."""
    seen: dict[str, str] = {}
    errors: list[str] = []
    for entry in entries:
        key = _fold(entry.id)
        if key in seen:
            errors.append(f'{kind} ids {seen[key]!r} and {entry.id!r} are equal ignoring case')
        else:
            seen[key] = entry.id
    return errors


# ── Process-wide catalog ─────────────────────────────────────────────


@functools.lru_cache(maxsize=1)
def default_catalog() -> Catalog:
    """Return the process-wide catalog, loading it on first use.

    The configuration is resolved from the environment once; call
    ``default_catalog.cache_clear()`` to pick up a changed environment.
    """
    return Catalog.load(resolve_catalog_config())


def parse_license(identifier: str) -> License:
    """Resolve *identifier* against the default catalog.

    Raises:
        NotFoundError: If no license matches.
    """
    return default_catalog().license(identifier)


def parse_exception(identifier: str) -> LicenseException:
    """Resolve *identifier* against the default catalog's exceptions.

    Raises:
        NotFoundError: If no exception matches.
    """
    return default_catalog().exception(identifier)


def from_id_ext(identifier: str) -> ExtendedLicense | None:
    """Return the curated-facts view of a license, or ``None``."""
    return default_catalog().extension(identifier)


def licenses() -> Iterator[License]:
    """Iterate over every license in the default catalog."""
    return default_catalog().licenses()


def exceptions() -> Iterator[LicenseException]:
    """Iterate over every license exception in the default catalog."""
    return default_catalog().exceptions()
