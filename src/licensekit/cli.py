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


"""Command-line interface for licensekit.

Commands::

    licensekit text MIT Apache-2.0     # print license texts
    echo MIT | licensekit text -       # ids from stdin, one per line
    licensekit show Apache-2.0         # record as a table
    licensekit show LLVM-exception --exception --json
    licensekit list --osi              # OSI-approved licenses
    licensekit list --exceptions
    licensekit facts MIT               # curated permissions etc.

Global flags (before the command): ``-v``/``-q`` for verbosity,
``--json-log`` for JSON log lines on stderr, ``--data-dir`` and
``--no-extensions`` to load a different catalog.

Exit codes:
    0  Success.
    1  An identifier was not found, or has no curated facts.
    2  The catalog data failed to load.
"""

from __future__ import annotations

import argparse
import json
import sys
from collections.abc import Iterable, Sequence

from rich.console import Console
from rich.table import Table
from rich.text import Text

from licensekit._types import License, LicenseException
from licensekit.catalog import Catalog, default_catalog
from licensekit.config import resolve_catalog_config
from licensekit.errors import CatalogDataError, NotFoundError
from licensekit.ext import ExtendedLicense
from licensekit.logging import configure_logging, get_logger
from licensekit.serde import entry_to_dict

__all__ = [
    'build_parser',
    'main',
]

logger = get_logger(__name__)


def _yes_no(value: bool) -> str:
    return 'yes' if value else 'no'


def _read_ids(ids: Sequence[str]) -> Iterable[str]:
    """Expand ``-`` into the non-blank lines of stdin."""
    for identifier in ids:
        if identifier == '-':
            for line in sys.stdin:
                stripped = line.strip()
                if stripped:
                    yield stripped
        else:
            yield identifier


# ── Commands ─────────────────────────────────────────────────────────


def _cmd_text(args: argparse.Namespace, catalog: Catalog, console: Console, err: Console) -> int:
    """Print the text of each license (or exception with ``--exception``)."""
    status = 0
    for identifier in _read_ids(args.ids):
        try:
            entry: License | LicenseException = (
                catalog.exception(identifier) if args.exception else catalog.license(identifier)
            )
        except NotFoundError as exc:
            err.print(Text(f'error: {exc}'))
            status = 1
            continue
        text = entry.text
        sys.stdout.write(text if text.endswith('\n') else text + '\n')
    sys.stdout.flush()
    return status


def _cmd_show(args: argparse.Namespace, catalog: Catalog, console: Console, err: Console) -> int:
    """Render one record as a table or as JSON."""
    try:
        entry: License | LicenseException = (
            catalog.exception(args.id) if args.exception else catalog.license(args.id)
        )
    except NotFoundError as exc:
        err.print(Text(f'error: {exc}'))
        return 1

    if args.json:
        sys.stdout.write(json.dumps(entry_to_dict(entry), indent=2) + '\n')
        return 0

    table = Table(show_header=False, show_edge=False, pad_edge=False)
    table.add_column('Field', style='bold')
    table.add_column('Value')
    table.add_row('ID', Text(entry.id))
    table.add_row('Name', Text(entry.name))
    if isinstance(entry, License):
        table.add_row('OSI approved', _yes_no(entry.is_osi_approved))
        table.add_row('FSF libre', _yes_no(entry.is_fsf_libre))
    table.add_row('Deprecated', _yes_no(entry.is_deprecated))
    if entry.comments:
        table.add_row('Comments', Text(entry.comments))
    if entry.see_also:
        table.add_row('See also', Text('\n'.join(entry.see_also)))
    if isinstance(entry, License):
        table.add_row('Standard header', _yes_no(entry.header is not None))
    if isinstance(entry, ExtendedLicense):
        table.add_row('Permissions', Text(', '.join(entry.permissions.facts()) or '-'))
        table.add_row('Conditions', Text(', '.join(entry.conditions.facts()) or '-'))
        table.add_row('Limitations', Text(', '.join(entry.limitations.facts()) or '-'))
    console.print(table)
    return 0


def _cmd_list(args: argparse.Namespace, catalog: Catalog, console: Console, err: Console) -> int:
    """List catalog entries, optionally filtered."""
    table = Table(show_header=True, header_style='bold', show_edge=False, pad_edge=False)
    table.add_column('ID', no_wrap=True)
    table.add_column('Name')
    if args.exceptions:
        table.add_column('Deprecated')
        for exc in catalog.exceptions():
            if args.deprecated and not exc.is_deprecated:
                continue
            table.add_row(Text(exc.id), Text(exc.name), _yes_no(exc.is_deprecated))
    else:
        table.add_column('OSI')
        table.add_column('FSF')
        table.add_column('Deprecated')
        for lic in catalog.licenses():
            if args.osi and not lic.is_osi_approved:
                continue
            if args.fsf and not lic.is_fsf_libre:
                continue
            if args.deprecated and not lic.is_deprecated:
                continue
            table.add_row(
                Text(lic.id),
                Text(lic.name),
                _yes_no(lic.is_osi_approved),
                _yes_no(lic.is_fsf_libre),
                _yes_no(lic.is_deprecated),
            )
    console.print(table)
    return 0


def _cmd_facts(args: argparse.Namespace, catalog: Catalog, console: Console, err: Console) -> int:
    """Print the curated permissions, conditions and limitations."""
    try:
        lic = catalog.license(args.id)
    except NotFoundError as exc:
        err.print(Text(f'error: {exc}'))
        return 1
    ext = catalog.extension(lic)
    if ext is None:
        err.print(Text(f'{lic.id}: no curated permissions, conditions or limitations'))
        return 1

    console.print(Text(ext.name, style='bold'))
    for title, group in (
        ('Permissions', ext.permissions),
        ('Conditions', ext.conditions),
        ('Limitations', ext.limitations),
    ):
        console.print()
        console.print(Text(f'{title}:', style='bold'))
        console.print(Text(str(group).rstrip('\n') or '(none)'))
    return 0


# ── Parser ───────────────────────────────────────────────────────────


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``licensekit`` command."""
    parser = argparse.ArgumentParser(
        prog='licensekit',
        description='Look up SPDX licenses and license exceptions.',
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging.')
    verbosity.add_argument('-q', '--quiet', action='store_true', help='Only log warnings and errors.')
    parser.add_argument('--json-log', action='store_true', help='Emit log lines as JSON.')
    parser.add_argument('--data-dir', default=None, help='Load the catalog from this directory.')
    parser.add_argument(
        '--no-extensions',
        action='store_true',
        help='Do not load curated permissions, conditions and limitations.',
    )

    sub = parser.add_subparsers(dest='command', required=True)

    text = sub.add_parser('text', help='Print license texts.')
    text.add_argument('ids', nargs='+', metavar='ID', help='Identifier, or - to read ids from stdin.')
    text.add_argument('--exception', action='store_true', help='Look up license exceptions instead.')
    text.set_defaults(func=_cmd_text)

    show = sub.add_parser('show', help='Show one record.')
    show.add_argument('id', metavar='ID')
    show.add_argument('--exception', action='store_true', help='Look up a license exception.')
    show.add_argument('--json', action='store_true', help='Print the full record as JSON.')
    show.set_defaults(func=_cmd_show)

    lst = sub.add_parser('list', help='List the catalog.')
    lst.add_argument('--exceptions', action='store_true', help='List license exceptions.')
    lst.add_argument('--osi', action='store_true', help='Only OSI-approved licenses.')
    lst.add_argument('--fsf', action='store_true', help='Only FSF Free/Libre licenses.')
    lst.add_argument('--deprecated', action='store_true', help='Only deprecated identifiers.')
    lst.set_defaults(func=_cmd_list)

    facts = sub.add_parser('facts', help='Show curated permissions, conditions and limitations.')
    facts.add_argument('id', metavar='ID')
    facts.set_defaults(func=_cmd_facts)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run the ``licensekit`` command and return its exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(verbose=args.verbose, quiet=args.quiet, json_log=args.json_log)

    console = Console()
    err = Console(stderr=True, soft_wrap=True)
    try:
        if args.data_dir is not None or args.no_extensions:
            catalog = Catalog.load(resolve_catalog_config(data_dir=args.data_dir, no_extensions=args.no_extensions))
        else:
            catalog = default_catalog()
    except CatalogDataError as exc:
        logger.error('catalog_load_failed', errors=len(exc.errors))
        err.print(Text(str(exc)))
        return 2

    return args.func(args, catalog, console, err)


if __name__ == '__main__':
    sys.exit(main())
