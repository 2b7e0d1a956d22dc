# -*- coding: utf-8 -*-

# ReqGuard
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
Request validation middleware for ReqGuard.

Architecture:
    validate_request() compiles one JSON Schema per configured section and
    returns a ValidationStage. The stage is a plain callable taking
    (request, next_) and is safe to share across concurrent requests.

Section evaluation order:
    1. Params
    2. Query
    3. Body
    4. Headers

The FastAPI adapter lives in reqguard.middleware.fastapi_dependency and is
imported separately so the core has no web framework import.
"""

from reqguard.middleware.request_validator import (
    RequestSections,
    ValidationStage,
    read_section,
    validate_body,
    validate_headers,
    validate_params,
    validate_query,
    validate_request,
)

__all__ = [
    "RequestSections",
    "ValidationStage",
    "read_section",
    "validate_body",
    "validate_headers",
    "validate_params",
    "validate_query",
    "validate_request",
]
