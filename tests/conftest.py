# -*- coding: utf-8 -*-

"""
Shared pytest fixtures for ReqGuard tests.
"""

from types import SimpleNamespace
from unittest.mock import Mock

import pytest


@pytest.fixture
def next_mock():
    """
    Continuation callback standing in for the host pipeline.

    Called with no arguments to proceed, with one error to abort.
    """
    return Mock(name="next_", return_value="next-result")


@pytest.fixture
def empty_request():
    """Request object carrying none of the four sections."""
    return SimpleNamespace()


@pytest.fixture
def body_schema():
    """Object schema with a required numeric bodyKey."""
    return {
        "type": "object",
        "properties": {"bodyKey": {"type": "number"}},
        "required": ["bodyKey"],
    }


@pytest.fixture
def params_schema():
    """Object schema with a required string urlParameter."""
    return {
        "type": "object",
        "properties": {"urlParameter": {"type": "string"}},
        "required": ["urlParameter"],
    }


@pytest.fixture
def query_schema():
    """Object schema with a required queryKey of at least 8 characters."""
    return {
        "type": "object",
        "properties": {"queryKey": {"type": "string", "minLength": 8}},
        "required": ["queryKey"],
    }


@pytest.fixture
def headers_schema():
    """Object schema with a required Authorization header of at least 8 characters."""
    return {
        "type": "object",
        "properties": {"Authorization": {"type": "string", "minLength": 8}},
        "required": ["Authorization"],
    }
