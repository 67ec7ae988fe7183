from __future__ import annotations

import pytest

from boardgames.errors import InvalidOrder, InvalidQuery, InvalidSortBy
from boardgames.services.validators import (
    MAX_IDENTIFIER,
    MAX_VOTE_CHANGE,
    SORTABLE_FIELDS,
    parse_comment_body,
    parse_identifier,
    parse_vote_change,
    resolve_order,
    resolve_sort_by,
)


class TestParseIdentifier:
    @pytest.mark.parametrize("raw, expected", [("1", 1), ("42", 42), ("0009", 9)])
    def test_plain_digits(self, raw, expected):
        assert parse_identifier(raw) == expected

    @pytest.mark.parametrize("raw", ["dog", "", "-1", "+1", "1.5", " 1", "1 ", "1e3", "١٢", None])
    def test_rejects_anything_else(self, raw):
        with pytest.raises(InvalidQuery) as exc_info:
            parse_identifier(raw)
        assert exc_info.value.message == "Invalid query"

    def test_rejects_bool(self):
        with pytest.raises(InvalidQuery):
            parse_identifier(True)


class TestSortWhitelist:
    def test_defaults(self):
        assert resolve_sort_by(None) == "created_at"
        assert resolve_order(None) == "desc"

    @pytest.mark.parametrize("field", SORTABLE_FIELDS)
    def test_accepts_every_review_field(self, field):
        assert resolve_sort_by(field) == field

    @pytest.mark.parametrize("field", ["not_a_column", "not-a-column", "votes; DROP TABLE reviews", "VOTES", ""])
    def test_rejects_unknown_sort_by(self, field):
        with pytest.raises(InvalidSortBy) as exc_info:
            resolve_sort_by(field)
        assert exc_info.value.message == "Invalid sort_by query"

    @pytest.mark.parametrize("order", ["asc", "desc"])
    def test_accepts_orders(self, order):
        assert resolve_order(order) == order

    @pytest.mark.parametrize("order", ["ASC", "Desc", "order", ""])
    def test_order_is_case_sensitive(self, order):
        with pytest.raises(InvalidOrder) as exc_info:
            resolve_order(order)
        assert exc_info.value.message == "Invalid order query"


class TestParseVoteChange:
    def test_empty_body_is_no_change(self):
        assert parse_vote_change({}) is None

    @pytest.mark.parametrize("delta", [1, -1, 0, 250])
    def test_integer_delta(self, delta):
        assert parse_vote_change({"inc_votes": delta}) == delta

    @pytest.mark.parametrize(
        "payload",
        [
            {"inc_votes": "cat"},
            {"inc_votes": 1.5},
            {"inc_votes": True},
            {"inc_votes": None},
            {"inc_votes": 1, "name": "Mitch"},
            {"votes": 1},
            ["inc_votes"],
        ],
    )
    def test_rejects_malformed_bodies(self, payload):
        with pytest.raises(InvalidQuery):
            parse_vote_change(payload)


class TestParseCommentBody:
    def test_valid(self):
        assert parse_comment_body({"body": "Nice", "author": "mallionaire"}) == ("Nice", "mallionaire")

    @pytest.mark.parametrize(
        "payload",
        [{}, {"body": "Nice"}, {"author": "mallionaire"}, {"body": "  ", "author": "mallionaire"}, {"body": 3, "author": "x"}],
    )
    def test_rejects_missing_fields(self, payload):
        with pytest.raises(InvalidQuery):
            parse_comment_body(payload)


class TestIdentifierBounds:
    def test_largest_accepted_id(self):
        assert parse_identifier(str(MAX_IDENTIFIER)) == MAX_IDENTIFIER

    def test_leading_zeros_do_not_count_towards_length(self):
        assert parse_identifier("0" * 30 + "7") == 7

    @pytest.mark.parametrize("raw", [str(MAX_IDENTIFIER + 1), "9" * 25, "1" * 5000])
    def test_rejects_out_of_range_ids(self, raw):
        with pytest.raises(InvalidQuery):
            parse_identifier(raw)

    def test_rejects_out_of_range_int(self):
        with pytest.raises(InvalidQuery):
            parse_identifier(MAX_IDENTIFIER + 1)


class TestVoteChangeBounds:
    @pytest.mark.parametrize("delta", [MAX_VOTE_CHANGE, -MAX_VOTE_CHANGE])
    def test_accepts_largest_delta(self, delta):
        assert parse_vote_change({"inc_votes": delta}) == delta

    @pytest.mark.parametrize("delta", [MAX_VOTE_CHANGE + 1, -(MAX_VOTE_CHANGE + 1), 10**25])
    def test_rejects_out_of_range_delta(self, delta):
        with pytest.raises(InvalidQuery):
            parse_vote_change({"inc_votes": delta})


def test_comment_fields_are_kept_as_sent():
    assert parse_comment_body({"body": "  Nice  ", "author": "mallionaire"}) == ("  Nice  ", "mallionaire")
    assert parse_comment_body({"body": "Nice", "author": " mallionaire"}) == ("Nice", " mallionaire")
