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


"""Permissions, conditions and limitations for curated licenses.

Only a hand-curated subset of the catalog carries these facts (see
``data/extensions.toml``).  For every other license the facts are
*not tracked*, which is different from every fact being false.

The capability is exposed as :class:`ExtendedLicense`, a
:class:`~licensekit._types.License` subclass.  The catalog stores the
extended instance in place of the plain one, so::

    lic = parse_license('MIT')
    if isinstance(lic, ExtendedLicense):
        print(lic.permissions)

Each fact group renders one ``- <sentence>`` line per fact that holds::

    >>> print(Permissions(commercial_use=True, private_use=True), end='')
    - May be used for commercial purposes.
    - May be used for private purposes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field, fields
from typing import TypeVar

from licensekit._types import License

__all__ = [
    'Conditions',
    'ExtendedLicense',
    'Limitations',
    'Permissions',
]

_G = TypeVar('_G', bound='_FactGroup')

# One sentence per fact, keyed by field name.
_SENTENCES: dict[str, str] = {
    # Permissions.
    'commercial_use': 'May be used for commercial purposes.',
    'distribution': 'May be distributed.',
    'modification': 'May be modified.',
    'patent_rights': 'Provides an express grant of patent rights from contributors.',
    'private_use': 'May be used for private purposes.',
    # Conditions.
    'disclose_sources': 'Source code must be made available when the software is distributed.',
    'document_changes': 'Changes made to the code must be documented.',
    'license_and_copyright_notice': 'The license and copyright notice must be included with the software.',
    'network_use_is_distribution': (
        'Users who interact with the software via network are given the right to receive a copy of the source code.'
    ),
    'same_license': 'Modifications must be released under the same license.',
    # Limitations.
    'no_liability': 'Includes a limitation of liability.',
    'no_trademark_rights': 'Does not grant trademark rights.',
    'no_warranty': 'Does not provide any warranty.',
    'no_patent_rights': 'Does not provide any rights in the patents of contributors.',
}


class _FactGroup:
    """Shared behaviour for the three boolean fact groups."""

    @classmethod
    def field_names(cls) -> tuple[str, ...]:
        """Return every fact name of this group in declaration order."""
        return tuple(f.name for f in fields(cls))  # type: ignore[arg-type]

    @classmethod
    def from_names(cls: type[_G], names: Iterable[str]) -> _G:
        """Build a group with exactly the named facts set.

        Raises:
            ValueError: If a name is not a fact of this group.
        """
        valid = cls.field_names()
        kwargs: dict[str, bool] = {}
        for name in names:
            if name not in valid:
                raise ValueError(f'{name!r} is not a {cls.__name__.lower()} fact; expected one of: {", ".join(valid)}')
            kwargs[name] = True
        return cls(**kwargs)

    def facts(self) -> tuple[str, ...]:
        """Return the names of the facts that hold, in declaration order."""
        return tuple(name for name in self.field_names() if getattr(self, name))

    def lines(self) -> list[str]:
        """Return one ``- <sentence>`` line per fact that holds."""
        return [f'- {_SENTENCES[name]}' for name in self.facts()]

    def __str__(self) -> str:
        """Render the facts that hold as a bullet list."""
        return ''.join(f'{line}\n' for line in self.lines())


@dataclass(frozen=True)
class Permissions(_FactGroup):
    """What the license allows."""

    commercial_use: bool = False
    distribution: bool = False
    modification: bool = False
    patent_rights: bool = False
    private_use: bool = False


@dataclass(frozen=True)
class Conditions(_FactGroup):
    """What the license requires in return."""

    disclose_sources: bool = False
    document_changes: bool = False
    license_and_copyright_notice: bool = False
    network_use_is_distribution: bool = False
    same_license: bool = False


@dataclass(frozen=True)
class Limitations(_FactGroup):
    """What the license explicitly does not provide."""

    no_liability: bool = False
    no_trademark_rights: bool = False
    no_warranty: bool = False
    no_patent_rights: bool = False


@dataclass(frozen=True, repr=False)
class ExtendedLicense(License):
    """A license that also carries curated permission/condition/limitation facts.

    Attributes:
        permissions: What the license allows.
        conditions: What the license requires.
        limitations: What the license does not provide.
    """

    permissions: Permissions = field(default_factory=Permissions)
    conditions: Conditions = field(default_factory=Conditions)
    limitations: Limitations = field(default_factory=Limitations)

    @classmethod
    def extend(
        cls,
        base: License,
        *,
        permissions: Permissions,
        conditions: Conditions,
        limitations: Limitations,
    ) -> ExtendedLicense:
        """Attach fact groups to an existing license record."""
        return cls(
            id=base.id,
            name=base.name,
            text=base.text,
            header=base.header,
            is_osi_approved=base.is_osi_approved,
            is_fsf_libre=base.is_fsf_libre,
            is_deprecated=base.is_deprecated,
            comments=base.comments,
            see_also=base.see_also,
            permissions=permissions,
            conditions=conditions,
            limitations=limitations,
        )
