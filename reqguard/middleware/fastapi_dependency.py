# -*- coding: utf-8 -*-

# ReqGuard
# Copyright (C) 2025 Jwadow
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU Affero General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.

"""
FastAPI / Starlette host adapter.

Turns a ValidationStage into a FastAPI dependency. The dependency snapshots the
Starlette request into RequestSections and raises RequestSchemaError on failure,
so FastAPI routes it to the application's exception handler:

    stage = validate_request({"params": ..., "body": ...})

    @app.post("/items/{item_id}", dependencies=[Depends(fastapi_dependency(stage))])
    async def create_item(item_id: str): ...

    @app.exception_handler(RequestSchemaError)
    async def on_schema_error(request, exc):
        return JSONResponse(status_code=422, content=exc.to_dict())
"""

import json
from typing import Any, Awaitable, Callable, Dict, Tuple

from fastapi import Request

from reqguard.middleware.request_validator import RequestSections, ValidationStage


def _collapse_query(request: Request) -> Dict[str, Any]:
    """Single-valued keys map to a string, repeated keys to a list of strings."""
    query: Dict[str, Any] = {}
    for key, value in request.query_params.multi_items():
        if key not in query:
            query[key] = value
        elif isinstance(query[key], list):
            query[key].append(value)
        else:
            query[key] = [query[key], value]
    return query


def _is_json_media_type(media_type: str) -> bool:
    """application/json or any structured-syntax "+json" type."""
    return media_type == "application/json" or media_type.endswith("+json")


def _parse_content_type(content_type: str) -> Tuple[str, str]:
    """Split a Content-Type header into (media type, charset), charset defaulting to utf-8."""
    media_type, _, params = content_type.partition(";")
    charset = "utf-8"
    for param in params.split(";"):
        name, _, value = param.partition("=")
        if name.strip().lower() == "charset" and value.strip():
            charset = value.strip().strip('"')
    return media_type.strip().lower(), charset


async def _decode_body(request: Request) -> Any:
    """
    Decode the request body the way the route will see it.

    JSON media types are parsed. Other payloads are decoded as text with the
    declared charset, or left as raw bytes when they aren't valid text.
    Malformed JSON is treated like any other text payload. Empty body is None.
    """
    raw = await request.body()
    if not raw:
        return None

    media_type, charset = _parse_content_type(request.headers.get("content-type", ""))
    if _is_json_media_type(media_type):
        try:
            return json.loads(raw)
        except ValueError:
            pass

    try:
        return raw.decode(charset)
    except (UnicodeDecodeError, LookupError):
        return raw


def _join_headers(request: Request) -> Dict[str, str]:
    """Lower-cased header names; repeated headers joined with ", "."""
    return {key: ", ".join(request.headers.getlist(key)) for key in request.headers.keys()}


async def read_request_sections(request: Request) -> RequestSections:
    """
    Snapshot a Starlette request into the four validated sections.

    Args:
        request: Incoming Starlette/FastAPI request

    Returns:
        RequestSections with path params, query (repeated keys as lists),
        decoded body and lower-cased headers (repeated values joined)
    """
    return RequestSections(
        params=dict(request.path_params),
        query=_collapse_query(request),
        body=await _decode_body(request),
        headers=_join_headers(request),
    )


def fastapi_dependency(
    stage: ValidationStage,
) -> Callable[[Request], Awaitable[RequestSections]]:
    """
    Wrap a ValidationStage as a FastAPI dependency.

    Args:
        stage: Stage built by validate_request() or a per-section constructor

    Returns:
        Async dependency returning the validated RequestSections snapshot;
        raises RequestSchemaError when any configured section fails
    """

    async def dependency(request: Request) -> RequestSections:
        sections = await read_request_sections(request)
        stage.enforce(sections)
        return sections

    return dependency
