# -*- coding: utf-8 -*-

"""
Unit tests for request validation error types.
Tests Section, SectionFailure and RequestSchemaError.
"""

import pytest

from reqguard.compiler import Violation
from reqguard.errors import RequestSchemaError, Section, SectionFailure


def _violation(rule: str = "required") -> Violation:
    return Violation(
        path="$",
        rule=rule,
        message="'bodyKey' is a required property",
        expected=["bodyKey"],
        actual={},
    )


class TestSection:
    """Tests for the Section enum."""

    def test_declaration_order_is_evaluation_order(self):
        """
        What it does: Verifies iteration order is Params, Query, Body, Headers.
        Purpose: The stage relies on enum order for failure ordering.
        """
        assert list(Section) == [
            Section.PARAMS,
            Section.QUERY,
            Section.BODY,
            Section.HEADERS,
        ]

    def test_attribute_names(self):
        """
        What it does: Verifies each section maps to its request attribute.
        Purpose: Section data is read from request.params/query/body/headers.
        """
        assert [s.attribute for s in Section] == ["params", "query", "body", "headers"]


class TestSectionFailure:
    """Tests for SectionFailure."""

    def test_to_dict(self):
        """
        What it does: Verifies to_dict() renders section name and violations.
        Purpose: Programmatic inspection without engine types.
        """
        failure = SectionFailure(Section.BODY, (_violation(),))

        result = failure.to_dict()

        print(f"Result: {result}")
        assert result["type"] == "Body"
        assert len(result["errors"]) == 1
        assert result["errors"][0]["rule"] == "required"

    def test_structural_equality(self):
        """
        What it does: Verifies failures with equal content compare equal.
        Purpose: Identical requests must produce identical outcomes.
        """
        assert SectionFailure(Section.QUERY, (_violation(),)) == SectionFailure(
            Section.QUERY, (_violation(),)
        )
        assert SectionFailure(Section.QUERY, (_violation(),)) != SectionFailure(
            Section.BODY, (_violation(),)
        )

    def test_section_failure_is_unhashable(self):
        """
        What it does: Verifies hash() raises TypeError for SectionFailure.
        Purpose: Violations hold lists and dicts, so failures can't be hashed consistently.
        """
        failure = SectionFailure(Section.BODY, (_violation(),))

        with pytest.raises(TypeError):
            hash(failure)


class TestRequestSchemaError:
    """Tests for the aggregate RequestSchemaError."""

    def test_message_is_fixed(self):
        """
        What it does: Verifies the error carries a fixed descriptive message.
        Purpose: Details live in failures, not in the message string.
        """
        error = RequestSchemaError([SectionFailure(Section.BODY, (_violation(),))])

        assert str(error) == "Request validation failed"
        assert isinstance(error, Exception)

    def test_failures_preserve_order(self):
        """
        What it does: Verifies failures keep the order they were given in.
        Purpose: Sections are reported in evaluation order.
        """
        failures = [
            SectionFailure(Section.PARAMS, (_violation(),)),
            SectionFailure(Section.BODY, (_violation("type"),)),
        ]

        error = RequestSchemaError(failures)

        assert error.sections == (Section.PARAMS, Section.BODY)
        assert error.failures == tuple(failures)

    def test_failures_are_immutable(self):
        """
        What it does: Verifies mutating the input list doesn't affect the error.
        Purpose: The aggregate error is immutable once built.
        """
        failures = [SectionFailure(Section.PARAMS, (_violation(),))]
        error = RequestSchemaError(failures)

        failures.append(SectionFailure(Section.BODY, (_violation(),)))

        assert error.sections == (Section.PARAMS,)
        assert isinstance(error.failures, tuple)

    def test_to_dict(self):
        """
        What it does: Verifies to_dict() includes message and every section.
        Purpose: Error formatters can build an HTTP body from one call.
        """
        error = RequestSchemaError(
            [
                SectionFailure(Section.PARAMS, (_violation(),)),
                SectionFailure(Section.HEADERS, (_violation("minLength"),)),
            ]
        )

        result = error.to_dict()

        print(f"Result: {result}")
        assert result["message"] == "Request validation failed"
        assert [item["type"] for item in result["errors"]] == ["Params", "Headers"]

    def test_failures_compare_structurally(self):
        """
        What it does: Verifies errors with equal content have equal failures.
        Purpose: Outcome comparison across repeated requests goes through failures.
        """
        first = RequestSchemaError([SectionFailure(Section.BODY, (_violation(),))])
        second = RequestSchemaError([SectionFailure(Section.BODY, (_violation(),))])
        empty = RequestSchemaError([])

        assert first.failures == second.failures
        assert first.failures != empty.failures

    def test_identity_equality_and_hash_agree(self):
        """
        What it does: Verifies errors keep exception identity semantics.
        Purpose: Equal errors must hash equally; distinct instances stay distinct.
        """
        first = RequestSchemaError([SectionFailure(Section.BODY, (_violation(),))])
        second = RequestSchemaError([SectionFailure(Section.BODY, (_violation(),))])

        assert first == first
        assert first != second
        assert len({first, second}) == 2
        assert hash(first) == hash(first)

    def test_can_be_raised(self):
        """
        What it does: Verifies the error can be raised and caught.
        Purpose: Supports the raising entry point.
        """
        with pytest.raises(RequestSchemaError) as exc_info:
            raise RequestSchemaError([SectionFailure(Section.QUERY, (_violation(),))])

        assert exc_info.value.sections == (Section.QUERY,)

    def test_repr_lists_sections(self):
        """
        What it does: Verifies repr names the failing sections.
        Purpose: Readable debugging output.
        """
        error = RequestSchemaError(
            [
                SectionFailure(Section.PARAMS, (_violation(),)),
                SectionFailure(Section.BODY, (_violation(),)),
            ]
        )

        assert repr(error) == "RequestSchemaError([Params, Body])"
