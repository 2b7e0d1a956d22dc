# -*- coding: utf-8 -*-

# ReqGuard
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Request validation stage builder.

Compiles up to four section schemas (params, query, body, headers) once and
returns a ValidationStage that checks each incoming request against them.

Execution order per request is fixed:
  1. Params
  2. Query
  3. Body
  4. Headers

Every configured section is always checked; failures are collected into a
single RequestSchemaError instead of stopping at the first bad section.

Failure signaling:
  - stage(request, next_)  - canonical: next_() on success, next_(error) on failure
  - stage.enforce(request) - raises RequestSchemaError on failure
"""

from collections.abc import Mapping as MappingABC
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Union

from loguru import logger

from reqguard.compiler import CompiledChecker, Schema, compile_schema
from reqguard.errors import RequestSchemaError, Section, SectionFailure

SectionKey = Union[Section, str]
NextFunction = Callable[..., Any]

# Sections that default to an empty mapping when the request doesn't carry them.
# A missing body stays None ("no body").
_MAPPING_SECTIONS = (Section.PARAMS, Section.QUERY, Section.HEADERS)


@dataclass(frozen=True)
class RequestSections:
    """
    Snapshot of the four validated parts of a request.

    Host adapters build one of these from their framework's request object.
    """

    params: Mapping[str, Any] = field(default_factory=dict)
    query: Mapping[str, Any] = field(default_factory=dict)
    body: Any = None
    headers: Mapping[str, Any] = field(default_factory=dict)


def _normalize_section_key(key: SectionKey) -> Section:
    """Map a Section member or its name ("body", "Body", "BODY") to Section."""
    if isinstance(key, Section):
        return key
    if isinstance(key, str):
        for section in Section:
            if key.lower() == section.attribute:
                return section
    raise ValueError(
        f"Unknown request section: {key!r} "
        f"(expected one of: {', '.join(s.attribute for s in Section)})"
    )


def read_section(request: Any, section: Section) -> Any:
    """
    Read the live data for one section without mutating the request.

    Accepts mapping-style requests ({"body": ...}) and attribute-style
    requests (request.body). Missing params/query/headers read as {}.
    """
    if isinstance(request, MappingABC):
        value = request.get(section.attribute)
    else:
        value = getattr(request, section.attribute, None)

    if value is None and section in _MAPPING_SECTIONS:
        return {}
    return value


class ValidationStage:
    """
    Pipeline stage validating request sections against precompiled schemas.

    Holds only immutable CompiledCheckers, so one instance serves all
    requests. Sections without a checker are never validated.
    """

    __slots__ = ("_checkers",)

    def __init__(self, checkers: Mapping[Section, CompiledChecker]):
        # Store in evaluation order regardless of how the caller ordered them
        self._checkers: Tuple[Tuple[Section, CompiledChecker], ...] = tuple(
            (section, checkers[section]) for section in Section if section in checkers
        )

    @property
    def sections(self) -> Tuple[Section, ...]:
        return tuple(section for section, _ in self._checkers)

    def evaluate(self, request: Any) -> Optional[RequestSchemaError]:
        """
        Check every configured section of a request.

        Args:
            request: Mapping- or attribute-style request

        Returns:
            None if all sections conform, otherwise a RequestSchemaError
            holding every failing section in evaluation order
        """
        failures: List[SectionFailure] = []

        for section, checker in self._checkers:
            data = read_section(request, section)
            if not checker.check(data):
                failures.append(SectionFailure(section, tuple(checker.violations(data))))

        if failures:
            return RequestSchemaError(failures)
        return None

    def __call__(self, request: Any, next_: NextFunction) -> Any:
        """
        Run the stage with continuation-style signaling.

        Calls next_() when the request conforms, next_(error) otherwise.
        Never raises for validation failures.
        """
        error = self.evaluate(request)
        if error is not None:
            return next_(error)
        return next_()

    def enforce(self, request: Any) -> None:
        """Run the stage, raising RequestSchemaError on failure."""
        error = self.evaluate(request)
        if error is not None:
            raise error

    def __repr__(self) -> str:
        names = ", ".join(section.value for section in self.sections)
        return f"ValidationStage([{names}])"


def validate_request(
    schemas: Optional[Mapping[SectionKey, Optional[Schema]]] = None,
    *,
    format_checking: Optional[bool] = None,
) -> ValidationStage:
    """
    Build a validation stage for several request sections at once.

    Each present schema is compiled exactly once, here. Sections left out
    (or mapped to None) are skipped for every request.

    Args:
        schemas: Mapping of section ("params", "query", "body", "headers"
                 or Section members) to a JSON Schema
        format_checking: Enforce "format" assertions; defaults to config

    Returns:
        ValidationStage ready to be used as a pipeline stage

    Raises:
        ValueError: If a key is not a known section
        jsonschema.exceptions.SchemaError: If a schema is malformed

    Example:
        >>> stage = validate_request({
        ...     "params": {"type": "object", "required": ["id"]},
        ...     "body": {"type": "object", "required": ["name"]},
        ... })
        >>> stage.evaluate({"params": {"id": "1"}, "body": {"name": "x"}}) is None
        True
    """
    checkers: Dict[Section, CompiledChecker] = {}

    for key, schema in (schemas or {}).items():
        section = _normalize_section_key(key)
        if schema is None:
            continue
        if section in checkers:
            raise ValueError(f"Schema for section {section.value} given more than once")
        checkers[section] = compile_schema(schema, format_checking=format_checking)

    stage = ValidationStage(checkers)
    if stage.sections:
        logger.debug(
            "[RequestValidator] Stage built for sections: {}",
            ", ".join(section.value for section in stage.sections),
        )
    else:
        logger.debug("[RequestValidator] Stage built with no sections, every request passes")
    return stage


def validate_params(schema: Schema, *, format_checking: Optional[bool] = None) -> ValidationStage:
    """Build a stage validating only URL path parameters."""
    return validate_request({Section.PARAMS: schema}, format_checking=format_checking)


def validate_query(schema: Schema, *, format_checking: Optional[bool] = None) -> ValidationStage:
    """Build a stage validating only the query string."""
    return validate_request({Section.QUERY: schema}, format_checking=format_checking)


def validate_body(schema: Schema, *, format_checking: Optional[bool] = None) -> ValidationStage:
    """Build a stage validating only the decoded body."""
    return validate_request({Section.BODY: schema}, format_checking=format_checking)


def validate_headers(schema: Schema, *, format_checking: Optional[bool] = None) -> ValidationStage:
    """Build a stage validating only request headers."""
    return validate_request({Section.HEADERS: schema}, format_checking=format_checking)
