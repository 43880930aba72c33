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

"""Catalog entry types shared across licensekit.

This module must have **zero** imports from other ``licensekit``
modules to avoid circular-import chains.  It is safe to import from
any module in the project.

Two layers live here:

- :class:`LicenseLike` and :class:`ExceptionLike` are the read-only
  capability protocols.  Anything exposing these attributes can be
  rendered, serialized or filtered without knowing its concrete type.
- :class:`License` and :class:`LicenseException` are the frozen records
  the catalog actually stores, one instance per SPDX identifier.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

__all__ = [
    'ExceptionLike',
    'License',
    'LicenseException',
    'LicenseLike',
]


@runtime_checkable
class LicenseLike(Protocol):
    """Read-only accessors every license entry provides."""

    @property
    def id(self) -> str:
        """SPDX short identifier, e.g. ``"Apache-2.0"``."""
        ...

    @property
    def name(self) -> str:
        """Full name, e.g. ``"Apache License 2.0"``."""
        ...

    @property
    def text(self) -> str:
        """The license text."""
        ...

    @property
    def header(self) -> str | None:
        """The standard license header, if SPDX publishes one."""
        ...

    @property
    def is_osi_approved(self) -> bool:
        """Whether the license is OSI approved."""
        ...

    @property
    def is_fsf_libre(self) -> bool:
        """Whether the license is FSF Free/Libre."""
        ...

    @property
    def is_deprecated(self) -> bool:
        """Whether the identifier is deprecated."""
        ...

    @property
    def comments(self) -> str | None:
        """SPDX license comments."""
        ...

    @property
    def see_also(self) -> tuple[str, ...]:
        """Reference URLs."""
        ...


@runtime_checkable
class ExceptionLike(Protocol):
    """Read-only accessors every license exception entry provides."""

    @property
    def id(self) -> str:
        """SPDX exception identifier, e.g. ``"LLVM-exception"``."""
        ...

    @property
    def name(self) -> str:
        """Full name of the exception."""
        ...

    @property
    def text(self) -> str:
        """The exception text."""
        ...

    @property
    def is_deprecated(self) -> bool:
        """Whether the identifier is deprecated."""
        ...

    @property
    def comments(self) -> str | None:
        """SPDX exception comments."""
        ...

    @property
    def see_also(self) -> tuple[str, ...]:
        """Reference URLs."""
        ...


@dataclass(frozen=True, repr=False)
class License:
    """A single license from the SPDX License List.

    ``str()`` gives the full name; ``repr()`` gives the identifier.

    Attributes:
        id: SPDX short identifier in its canonical casing.
        name: Full name (*Full name* column on spdx.org/licenses).
        text: The license text.
        header: Standard license header, or ``None``.
        is_osi_approved: *OSI Approved?* column.
        is_fsf_libre: *FSF Free/Libre?* column.
        is_deprecated: ``True`` for identifiers kept only for lookups.
        comments: SPDX license comments, or ``None``.
        see_also: Reference URLs in citation order.
    """

    id: str
    name: str
    text: str = field(compare=False)
    header: str | None = field(default=None, compare=False)
    is_osi_approved: bool = False
    is_fsf_libre: bool = False
    is_deprecated: bool = False
    comments: str | None = None
    see_also: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return the full license name."""
        return self.name

    def __repr__(self) -> str:
        """Return ``License('<id>')``."""
        return f'{type(self).__name__}({self.id!r})'


@dataclass(frozen=True, repr=False)
class LicenseException:
    """A single exception from the SPDX License Exceptions list.

    Named ``LicenseException`` rather than ``Exception`` so it does not
    shadow the builtin.

    Attributes:
        id: SPDX exception identifier in its canonical casing.
        name: Full name of the exception.
        text: The exception text.
        is_deprecated: ``True`` for identifiers kept only for lookups.
        comments: SPDX exception comments, or ``None``.
        see_also: Reference URLs in citation order.
    """

    id: str
    name: str
    text: str = field(compare=False)
    is_deprecated: bool = False
    comments: str | None = None
    see_also: tuple[str, ...] = ()

    def __str__(self) -> str:
        """Return the full exception name."""
        return self.name

    def __repr__(self) -> str:
        """Return ``LicenseException('<id>')``."""
        return f'{type(self).__name__}({self.id!r})'
