"""
Tests for composite identifier parsing.
"""

import uuid

import pytest

from course_library.exceptions import BadRequestError
from course_library.utils.id_set import format_id_set, parse_id_set


def test_parse_preserves_order_and_duplicates():
    first, second = uuid.uuid4(), uuid.uuid4()

    assert parse_id_set(f"{first},{second},{first}") == [first, second, first]


def test_parse_skips_empty_tokens_and_whitespace():
    first = uuid.uuid4()

    assert parse_id_set(f" {first} ,,") == [first]


@pytest.mark.parametrize("raw", [None, "", "   ", ",,"])
def test_parse_rejects_missing_ids(raw):
    with pytest.raises(BadRequestError) as exc_info:
        parse_id_set(raw)

    assert "ids" in exc_info.value.errors


def test_parse_rejects_invalid_token():
    with pytest.raises(BadRequestError) as exc_info:
        parse_id_set(f"{uuid.uuid4()},not-an-id")

    assert exc_info.value.errors == {
        "ids": ["The value 'not-an-id' is not a valid identifier."]
    }


def test_format_is_accepted_by_parse():
    ids = [uuid.uuid4(), uuid.uuid4()]

    assert parse_id_set(format_id_set(ids)) == ids
