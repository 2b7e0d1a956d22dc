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
ReqGuard - JSON Schema request validation stages.

Modules:
    - config: Configuration and constants
    - compiler: Schema compiler adapter (CompiledChecker, Violation)
    - errors: Section, SectionFailure, RequestSchemaError
    - middleware: Validation stage builder and per-section constructors
    - log_setup: loguru sink configuration
"""

# Version is imported from config.py - the single source of truth
from reqguard.config import APP_VERSION as __version__

# Schema compiler
from reqguard.compiler import CompiledChecker, Violation, compile_schema

# Errors
from reqguard.errors import RequestSchemaError, Section, SectionFailure

# Stage builder
from reqguard.middleware import (
    RequestSections,
    ValidationStage,
    validate_body,
    validate_headers,
    validate_params,
    validate_query,
    validate_request,
)

__all__ = [
    # Version
    "__version__",

    # Schema compiler
    "CompiledChecker",
    "Violation",
    "compile_schema",

    # Errors
    "RequestSchemaError",
    "Section",
    "SectionFailure",

    # Stage builder
    "RequestSections",
    "ValidationStage",
    "validate_body",
    "validate_headers",
    "validate_params",
    "validate_query",
    "validate_request",
]
