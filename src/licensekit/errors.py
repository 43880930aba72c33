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

"""Exception hierarchy for licensekit.

Every error raised by the package derives from :class:`LicenseKitError`
so callers can catch the whole family with a single ``except`` clause.

Only two things can go wrong:

- :class:`NotFoundError`: an identifier matched no license or exception.
- :class:`CatalogDataError`: the catalog data on disk failed validation
  while it was being loaded.

Everything else in the package reads immutable in-memory data and
cannot fail.
"""

from __future__ import annotations

from typing import Literal

__all__ = [
    'CatalogDataError',
    'EntryKind',
    'LicenseKitError',
    'NotFoundError',
]

#: The two kinds of catalog entry.
EntryKind = Literal['license', 'exception']


class LicenseKitError(Exception):
    """Base class for all licensekit errors."""


class NotFoundError(LicenseKitError, LookupError):
    """Raised when an identifier does not match any catalog entry.

    Attributes:
        kind: Which table was searched (``"license"`` or ``"exception"``).
        identifier: The identifier exactly as the caller supplied it.
    """

    def __init__(self, kind: EntryKind, identifier: str) -> None:
        """Initialize with the searched kind and the unmatched identifier."""
        self.kind = kind
        self.identifier = identifier
        super().__init__(f'SPDX {kind} id not found: {identifier!r}')


class CatalogDataError(LicenseKitError):
    """Raised when catalog data fails validation.

    Attributes:
        errors: List of human-readable error strings.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = errors
        bullet_list = '\n'.join(f'  - {e}' for e in errors)
        super().__init__(f'License catalog has {len(errors)} validation error(s):\n{bullet_list}')
