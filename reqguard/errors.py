# -*- coding: utf-8 -*-

# ReqGuard
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
# GNU Affero General Public License for more details.
#
# You should have received a copy of the GNU Affero General Public License
# along with this program. If not, see <https://www.gnu.org/licenses/>.

"""
Request validation error types.

Architecture:
- Section: Enum of request sections, declared in evaluation order
- SectionFailure: All violations found in one section
- RequestSchemaError: Aggregate of every failing section for one request

Example:
    >>> error = RequestSchemaError([SectionFailure(Section.BODY, (violation,))])
    >>> error.sections
    (<Section.BODY: 'Body'>,)
    >>> str(error)
    'Request validation failed'
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, Tuple

from reqguard.compiler import Violation


class Section(Enum):
    """
    Independently validated parts of an incoming request.

    Declaration order is the evaluation order: Params, Query, Body, Headers.
    """

    PARAMS = "Params"
    QUERY = "Query"
    BODY = "Body"
    HEADERS = "Headers"

    @property
    def attribute(self) -> str:
        """Name of the request attribute/key holding this section's data."""
        return self.value.lower()


@dataclass(frozen=True)
class SectionFailure:
    """
    Violations reported for one request section.

    Attributes:
        section: Section that failed its schema
        violations: Every violation found, in engine order
    """

    section: Section
    violations: Tuple[Violation, ...]

    __hash__ = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "type": self.section.value,
            "errors": [violation.to_dict() for violation in self.violations],
        }


class RequestSchemaError(Exception):
    """
    Aggregate validation failure for a single request.

    Carries every failing section (Params -> Query -> Body -> Headers), each
    with its complete violation list. Built once per failing request and
    never mutated afterwards. Compare errors through their failures.
    """

    MESSAGE = "Request validation failed"

    def __init__(self, failures: Iterable[SectionFailure]):
        super().__init__(self.MESSAGE)
        self._failures: Tuple[SectionFailure, ...] = tuple(failures)

    @property
    def failures(self) -> Tuple[SectionFailure, ...]:
        return self._failures

    @property
    def sections(self) -> Tuple[Section, ...]:
        return tuple(failure.section for failure in self._failures)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "message": self.MESSAGE,
            "errors": [failure.to_dict() for failure in self._failures],
        }

    def __repr__(self) -> str:
        names = ", ".join(section.value for section in self.sections)
        return f"RequestSchemaError([{names}])"
