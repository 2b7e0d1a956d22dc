# -*- coding: utf-8 -*-

# ReqGuard
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Schema compiler adapter.

Wraps a JSON Schema descriptor into a reusable checker. All preprocessing
(draft selection, meta-schema check, validator construction) happens once in
compile_schema(); the request hot path only runs the prebuilt validator.

Architecture:
- Violation: one schema rule failure (path, rule, message, expected, actual)
- CompiledChecker: immutable checker with check() and violations()
- compile_schema(): builds a CompiledChecker from a schema descriptor

Example:
    >>> checker = compile_schema({"type": "string", "minLength": 8})
    >>> checker.check("short")
    False
    >>> [v.rule for v in checker.violations("short")]
    ['minLength']
"""

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Union

from jsonschema import validators
from jsonschema.exceptions import ValidationError
from loguru import logger

from reqguard.config import (
    SCHEMA_DEFAULT_DRAFT,
    SCHEMA_FORMAT_CHECKING,
    SUPPORTED_SCHEMA_DRAFTS,
)

Schema = Union[Dict[str, Any], bool]

# "draft7" -> Draft7Validator, "2020-12" -> Draft202012Validator
_DRAFT_VALIDATORS = {
    draft: getattr(validators, f"Draft{draft.replace('draft', '').replace('-', '')}Validator")
    for draft in SUPPORTED_SCHEMA_DRAFTS
}



def _is_mapping(checker: Any, instance: Any) -> bool:
    """Treat any Mapping (MappingProxyType, Starlette Headers, ...) as a JSON object."""
    return isinstance(instance, Mapping)


@dataclass(frozen=True)
class Violation:
    """
    A single way a value failed to conform to its schema.

    Attributes:
        path: JSON path inside the validated section ("$" for the section root)
        rule: Schema keyword that failed (e.g. "required", "minLength", "type";
              "false" for a boolean false schema)
        message: Human-readable description from the schema engine
        expected: Value of the failing keyword in the schema
        actual: The offending value
    """

    path: str
    rule: str
    message: str
    expected: Any
    actual: Any

    # expected/actual may hold lists and dicts
    __hash__ = None

    @classmethod
    def from_validation_error(cls, error: ValidationError) -> "Violation":
        return cls(
            path=error.json_path,
            rule="false" if error.validator is None else str(error.validator),
            message=error.message,
            expected=error.validator_value,
            actual=error.instance,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "path": self.path,
            "rule": self.rule,
            "message": self.message,
            "expected": self.expected,
            "actual": self.actual,
        }


class CompiledChecker:
    """
    Precompiled schema checker.

    Holds one jsonschema validator built at compile time. Validators keep no
    per-call state, so one checker can serve any number of concurrent requests.
    """

    __slots__ = ("_schema", "_validator", "_draft")

    def __init__(self, schema: Schema, validator: Any, draft: str):
        self._schema = schema
        self._validator = validator
        self._draft = draft

    @property
    def schema(self) -> Schema:
        return self._schema

    def check(self, value: Any) -> bool:
        """Return True if value conforms to the schema."""
        return self._validator.is_valid(value)

    def violations(self, value: Any) -> Iterator[Violation]:
        """
        Lazily enumerate every rule violation in value.

        Each call returns a fresh generator. Conforming values yield nothing.
        """
        for error in self._validator.iter_errors(value):
            yield Violation.from_validation_error(error)

    def __repr__(self) -> str:
        return f"CompiledChecker({self._draft})"


def _resolve_validator_class(schema: Schema) -> Any:
    default_cls = _DRAFT_VALIDATORS[SCHEMA_DEFAULT_DRAFT]
    return validators.validator_for(schema, default=default_cls)


def compile_schema(
    schema: Schema,
    *,
    format_checking: Optional[bool] = None,
) -> CompiledChecker:
    """
    Compile a JSON Schema descriptor into a reusable CompiledChecker.

    The draft is taken from the schema's "$schema" keyword, falling back to
    SCHEMA_DEFAULT_DRAFT. The schema is checked against its meta-schema here,
    so a malformed descriptor fails at build time rather than per request.
    Any Mapping passes the "object" type, not only dict.

    Args:
        schema: JSON Schema (dict or boolean schema)
        format_checking: Enforce "format" assertions; defaults to SCHEMA_FORMAT_CHECKING

    Returns:
        CompiledChecker bound to a single prebuilt validator

    Raises:
        jsonschema.exceptions.SchemaError: If the schema is not a valid descriptor
    """
    validator_cls = _resolve_validator_class(schema)
    validator_cls.check_schema(schema)

    if format_checking is None:
        format_checking = SCHEMA_FORMAT_CHECKING

    mapping_cls = validators.extend(
        validator_cls,
        type_checker=validator_cls.TYPE_CHECKER.redefine("object", _is_mapping),
    )

    if format_checking:
        validator = mapping_cls(schema, format_checker=validator_cls.FORMAT_CHECKER)
    else:
        validator = mapping_cls(schema)

    logger.debug(
        "[SchemaCompiler] Compiled schema with {} (format_checking={})",
        validator_cls.__name__,
        format_checking,
    )
    return CompiledChecker(schema, validator, validator_cls.__name__)
