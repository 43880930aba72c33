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


"""SPDX licenses and license exceptions as typed Python records.

Resolve an identifier to its record, read its metadata and text, and
ask curated policy questions for common licenses::

    import licensekit

    lic = licensekit.parse_license('Apache-2.0')
    lic.name  # 'Apache License 2.0'
    lic.is_osi_approved  # True

    licensekit.parse_license('mit').id  # 'MIT' (case-insensitive)
    licensekit.parse_license('Not-A-License')  # raises NotFoundError

    ext = licensekit.from_id_ext('MIT')
    ext.permissions.commercial_use  # True
    print(ext.limitations)
    # - Includes a limitation of liability.
    # - Does not provide any warranty.

    licensekit.from_id_ext('GPL-2.0-only')  # None: facts not tracked

    for exc in licensekit.exceptions():
        print(exc.id)

The catalog is a snapshot bundled with the package and loaded once, on
first use.  See :mod:`licensekit.catalog` for the matching policy and
:mod:`licensekit.config` for loading a different snapshot.
"""

from licensekit._types import ExceptionLike, License, LicenseException, LicenseLike
from licensekit.catalog import (
    Catalog,
    default_catalog,
    exceptions,
    from_id_ext,
    licenses,
    parse_exception,
    parse_license,
)
from licensekit.config import CatalogConfig, resolve_catalog_config
from licensekit.errors import CatalogDataError, LicenseKitError, NotFoundError
from licensekit.ext import Conditions, ExtendedLicense, Limitations, Permissions

__all__ = [
    'Catalog',
    'CatalogConfig',
    'CatalogDataError',
    'Conditions',
    'ExceptionLike',
    'ExtendedLicense',
    'License',
    'LicenseException',
    'LicenseKitError',
    'LicenseLike',
    'Limitations',
    'NotFoundError',
    'Permissions',
    'default_catalog',
    'exceptions',
    'from_id_ext',
    'licenses',
    'parse_exception',
    'parse_license',
    'resolve_catalog_config',
]
