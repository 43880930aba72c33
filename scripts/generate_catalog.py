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


"""Regenerate the bundled catalog from SPDX ``license-list-data``.

Reads the SPDX JSON dump, either straight from GitHub or from a local
checkout of https://github.com/spdx/license-list-data, and rewrites:

- ``licenses.toml`` and ``text/licenses/<id>.txt``
- ``exceptions.toml`` and ``text/exceptions/<id>.txt``

``extensions.toml`` is curated by hand and never touched; the script
only warns when one of its ids disappears from the new snapshot.

Exit codes:
    0  Catalog written.
    1  Upstream data could not be read, or an extension id went missing.

Usage::

    python scripts/generate_catalog.py                     # full list from GitHub
    python scripts/generate_catalog.py --ref v3.25         # pinned release
    python scripts/generate_catalog.py --source ~/src/license-list-data
    python scripts/generate_catalog.py --existing-only     # refresh bundled ids only

Requires ``tomlkit`` (``pip install licensekit[generate]``).
"""

from __future__ import annotations

import argparse
import json
import sys
import urllib.request
from pathlib import Path
from typing import Any

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

import tomlkit

# ── Locations ──────────────────────────────────────────────────────────

BASE_URL = 'https://raw.githubusercontent.com/spdx/license-list-data/{ref}/json/{path}'

DATA_DIR = Path(__file__).resolve().parent.parent / 'src' / 'licensekit' / 'data'

LICENSES_HEADER = """\
Bundled snapshot of the SPDX License List.

Each table is keyed by the SPDX license identifier (canonical casing).
The legal text lives in ``text/licenses/<identifier>.txt``.

Fields:
  name          Full name from the SPDX list (required).
  osi_approved  OSI approved (default false).
  fsf_libre     FSF Free/Libre (default false).
  deprecated    Deprecated identifier, kept for lookups (default false).
  header        Standard license header (optional).
  comments      License comments (optional).
  see_also      Reference URLs in citation order (default []).

Regenerate with ``scripts/generate_catalog.py``."""

EXCEPTIONS_HEADER = """\
Bundled snapshot of the SPDX License Exceptions list.

Each table is keyed by the SPDX exception identifier (canonical casing).
The exception text lives in ``text/exceptions/<identifier>.txt``.

Fields:
  name          Full name from the SPDX list (required).
  deprecated    Deprecated identifier, kept for lookups (default false).
  comments      Exception comments (optional).
  see_also      Reference URLs in citation order (default []).

Regenerate with ``scripts/generate_catalog.py``."""

# ── Sources ────────────────────────────────────────────────────────────


def _fetch(url: str) -> bytes:
    """Fetch a URL and return the raw bytes."""
    if not url.startswith('https://'):
        msg = f'Only https:// URLs are allowed, got: {url}'
        raise ValueError(msg)
    with urllib.request.urlopen(url, timeout=30) as resp:  # noqa: S310
        return resp.read()


class Source:
    """Reads ``json/...`` documents from GitHub or a local checkout.

    Args:
        root: Local ``license-list-data`` checkout, or ``None`` to
            fetch from GitHub.
        ref: Git ref to fetch when *root* is ``None``.
    """

    def __init__(self, root: Path | None = None, ref: str = 'main') -> None:
        self.root = root
        self.ref = ref

    def read(self, path: str) -> Any:  # noqa: ANN401
        """Return the decoded JSON document at ``json/<path>``."""
        if self.root is not None:
            return json.loads((self.root / 'json' / path).read_text(encoding='utf-8'))
        return json.loads(_fetch(BASE_URL.format(ref=self.ref, path=path)))


def collect_licenses(source: Source, only: set[str] | None = None) -> list[dict[str, Any]]:
    """Return the per-license detail documents, sorted by id.

    The index entry is merged under the detail document so fields that
    only the index carries (``isFsfLibre`` in older releases) survive.
    """
    index = source.read('licenses.json')['licenses']
    result: list[dict[str, Any]] = []
    for entry in index:
        spdx_id = entry['licenseId']
        if only is not None and spdx_id not in only:
            continue
        details = source.read(f'details/{spdx_id}.json')
        result.append({**entry, **details})
    return sorted(result, key=lambda d: d['licenseId'].lower())


def collect_exceptions(source: Source, only: set[str] | None = None) -> list[dict[str, Any]]:
    """Return the per-exception detail documents, sorted by id."""
    index = source.read('exceptions.json')['exceptions']
    result: list[dict[str, Any]] = []
    for entry in index:
        exc_id = entry['licenseExceptionId']
        if only is not None and exc_id not in only:
            continue
        details = source.read(f'exceptions/{exc_id}.json')
        result.append({**entry, **details})
    return sorted(result, key=lambda d: d['licenseExceptionId'].lower())


# ── Rendering ──────────────────────────────────────────────────────────


def _comment_block(doc: tomlkit.TOMLDocument, text: str) -> None:
    for line in text.splitlines():
        doc.add(tomlkit.comment(line))
    doc.add(tomlkit.nl())


def _see_also(urls: list[str]) -> Any:  # noqa: ANN401
    arr = tomlkit.array()
    for url in urls:
        arr.append(url)
    if urls:
        arr.multiline(True)
    return arr


def _normalize_text(text: str) -> str:
    return text.rstrip() + '\n'


def render_licenses(details: list[dict[str, Any]]) -> tuple[str, dict[str, str]]:
    """Render ``licenses.toml`` and the text payloads.

    Returns:
        ``(toml_text, {id: license_text})``.
    """
    doc = tomlkit.document()
    _comment_block(doc, LICENSES_HEADER)
    texts: dict[str, str] = {}
    for d in details:
        spdx_id = d['licenseId']
        table = tomlkit.table()
        table.add('name', d['name'])
        table.add('osi_approved', bool(d.get('isOsiApproved', False)))
        table.add('fsf_libre', bool(d.get('isFsfLibre', False)))
        if d.get('isDeprecatedLicenseId'):
            table.add('deprecated', True)
        header = (d.get('standardLicenseHeader') or '').strip()
        if header:
            table.add('header', tomlkit.string(header + '\n', multiline=True))
        comments = (d.get('licenseComments') or '').strip()
        if comments:
            table.add('comments', comments)
        table.add('see_also', _see_also(d.get('seeAlso', [])))
        doc.add(spdx_id, table)
        texts[spdx_id] = _normalize_text(d['licenseText'])
    return tomlkit.dumps(doc), texts


def render_exceptions(details: list[dict[str, Any]]) -> tuple[str, dict[str, str]]:
    """Render ``exceptions.toml`` and the text payloads."""
    doc = tomlkit.document()
    _comment_block(doc, EXCEPTIONS_HEADER)
    texts: dict[str, str] = {}
    for d in details:
        exc_id = d['licenseExceptionId']
        table = tomlkit.table()
        table.add('name', d['name'])
        if d.get('isDeprecatedLicenseId'):
            table.add('deprecated', True)
        comments = (d.get('licenseComments') or '').strip()
        if comments:
            table.add('comments', comments)
        table.add('see_also', _see_also(d.get('seeAlso', [])))
        doc.add(exc_id, table)
        texts[exc_id] = _normalize_text(d['licenseExceptionText'])
    return tomlkit.dumps(doc), texts


# ── Output ─────────────────────────────────────────────────────────────


def write_catalog(
    out_dir: Path,
    licenses_toml: str,
    license_texts: dict[str, str],
    exceptions_toml: str,
    exception_texts: dict[str, str],
) -> None:
    """Write the TOML files and replace the text directories."""
    out_dir.mkdir(parents=True, exist_ok=True)
    (out_dir / 'licenses.toml').write_text(licenses_toml, encoding='utf-8')
    (out_dir / 'exceptions.toml').write_text(exceptions_toml, encoding='utf-8')
    for kind, texts in (('licenses', license_texts), ('exceptions', exception_texts)):
        text_dir = out_dir / 'text' / kind
        text_dir.mkdir(parents=True, exist_ok=True)
        for stale in text_dir.glob('*.txt'):
            if stale.stem not in texts:
                stale.unlink()
        for entry_id, text in texts.items():
            (text_dir / f'{entry_id}.txt').write_text(text, encoding='utf-8')


def missing_extension_ids(out_dir: Path, license_ids: set[str]) -> list[str]:
    """Return ``extensions.toml`` keys that are not in *license_ids*."""
    path = out_dir / 'extensions.toml'
    if not path.is_file():
        return []
    with path.open('rb') as f:
        curated = tomllib.load(f)
    return sorted(spdx_id for spdx_id in curated if spdx_id not in license_ids)


def _existing_ids(out_dir: Path, name: str) -> set[str]:
    with (out_dir / name).open('rb') as f:
        return set(tomllib.load(f))


# ── Main ───────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Regenerate the catalog and return 0 on success, 1 on failure."""
    parser = argparse.ArgumentParser(
        description='Regenerate the bundled SPDX catalog from license-list-data.',
    )
    parser.add_argument(
        '--source',
        type=Path,
        default=None,
        help='Local license-list-data checkout (default: fetch from GitHub).',
    )
    parser.add_argument(
        '--ref',
        default='main',
        help='Git ref to fetch from GitHub (default: main).',
    )
    parser.add_argument(
        '--output',
        type=Path,
        default=DATA_DIR,
        help=f'Catalog directory to write (default: {DATA_DIR}).',
    )
    parser.add_argument(
        '--existing-only',
        action='store_true',
        help='Only refresh ids already present in the output catalog.',
    )
    args = parser.parse_args(argv)

    source = Source(args.source, ref=args.ref)
    only_licenses = _existing_ids(args.output, 'licenses.toml') if args.existing_only else None
    only_exceptions = _existing_ids(args.output, 'exceptions.toml') if args.existing_only else None

    try:
        license_details = collect_licenses(source, only_licenses)
        exception_details = collect_exceptions(source, only_exceptions)
    except (OSError, ValueError, KeyError) as exc:
        print(f'error: could not read license-list-data: {exc}', file=sys.stderr)  # noqa: T201
        return 1

    licenses_toml, license_texts = render_licenses(license_details)
    exceptions_toml, exception_texts = render_exceptions(exception_details)
    write_catalog(args.output, licenses_toml, license_texts, exceptions_toml, exception_texts)
    print(  # noqa: T201
        f'wrote {len(license_texts)} licenses and {len(exception_texts)} exceptions to {args.output}',
    )

    missing = missing_extension_ids(args.output, set(license_texts))
    if missing:
        print(f'error: extensions.toml references missing ids: {", ".join(missing)}', file=sys.stderr)  # noqa: T201
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
