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
ReqGuard Configuration.

Centralized storage for all settings and constants.
Loads environment variables and provides typed access to them.
"""

import os
from typing import List

from dotenv import load_dotenv

# Load environment variables
load_dotenv()

# ==================================================================================================
# Logging Settings
# ==================================================================================================

# Log level for the library sink configured by log_setup.configure_logging()
# Available levels: TRACE, DEBUG, INFO, WARNING, ERROR, CRITICAL
# Default: INFO
LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

# ==================================================================================================
# Schema Engine Settings
# ==================================================================================================

# JSON Schema drafts understood by the compiler (each maps to jsonschema's
# Draft<N>Validator, e.g. "2020-12" -> Draft202012Validator).
# A schema's own "$schema" keyword always wins; this list only names the
# drafts allowed as the fallback below.
SUPPORTED_SCHEMA_DRAFTS: List[str] = [
    "draft4",
    "draft6",
    "draft7",
    "2019-09",
    "2020-12",
]

# Draft used for schemas that don't declare "$schema".
# Default: "2020-12"
_SCHEMA_DEFAULT_DRAFT_RAW: str = os.getenv("SCHEMA_DEFAULT_DRAFT", "2020-12").lower()
if _SCHEMA_DEFAULT_DRAFT_RAW in SUPPORTED_SCHEMA_DRAFTS:
    SCHEMA_DEFAULT_DRAFT: str = _SCHEMA_DEFAULT_DRAFT_RAW
else:
    SCHEMA_DEFAULT_DRAFT: str = "2020-12"

# Enforce the "format" keyword (email, uri, date-time, ...).
# JSON Schema treats "format" as an annotation by default, so this is off.
# Can be overridden per schema: compile_schema(schema, format_checking=True)
SCHEMA_FORMAT_CHECKING: bool = os.getenv(
    "SCHEMA_FORMAT_CHECKING", "false"
).lower() in (
    "true",
    "1",
    "yes",
)

# ==================================================================================================
# Application Version
# ==================================================================================================

APP_VERSION: str = "1.0"
