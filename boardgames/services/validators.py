"""Validation of caller-supplied path parameters, query parameters and bodies.

Everything here runs before storage is touched, so a malformed request never
reaches the database.
"""
import re

from boardgames.errors import InvalidOrder, InvalidQuery, InvalidSortBy

REVIEW_COLUMNS = (
    "review_id",
    "title",
    "designer",
    "owner",
    "review_img_url",
    "review_body",
    "category",
    "created_at",
    "votes",
)
SORTABLE_FIELDS = REVIEW_COLUMNS + ("comment_count",)
SORT_ORDERS = ("asc", "desc")

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"

VOTE_CHANGE_KEY = "inc_votes"

_IDENTIFIER_RE = re.compile(r"[0-9]+")

# Ids are BIGINT-sized at most; vote counts are 32-bit INTEGER columns.
MAX_IDENTIFIER = 2**63 - 1
MAX_VOTE_CHANGE = 2**31 - 1


def parse_identifier(raw) -> int:
    """Parse a path segment as a plain non-negative integer id.

    Signs, decimal points, whitespace and non-ASCII digits are all rejected.
    """
    if isinstance(raw, bool):
        raise InvalidQuery()
    if isinstance(raw, int):
        if raw < 0 or raw > MAX_IDENTIFIER:
            raise InvalidQuery()
        return raw
    if not isinstance(raw, str) or not _IDENTIFIER_RE.fullmatch(raw):
        raise InvalidQuery()
    # Length check first: int() refuses very long digit strings outright.
    if len(raw.lstrip("0")) > len(str(MAX_IDENTIFIER)):
        raise InvalidQuery()
    value = int(raw)
    if value > MAX_IDENTIFIER:
        raise InvalidQuery()
    return value


def resolve_sort_by(value) -> str:
    if value is None:
        return DEFAULT_SORT_BY
    if value not in SORTABLE_FIELDS:
        raise InvalidSortBy()
    return value


def resolve_order(value) -> str:
    if value is None:
        return DEFAULT_ORDER
    if value not in SORT_ORDERS:
        raise InvalidOrder()
    return value


def parse_vote_change(payload):
    """Return the requested vote delta, or None when the body asks for no change."""
    if not isinstance(payload, dict):
        raise InvalidQuery()
    if not payload:
        return None
    if set(payload) != {VOTE_CHANGE_KEY}:
        raise InvalidQuery()

    inc_votes = payload[VOTE_CHANGE_KEY]
    # bool is an int subclass; JSON true/false is not a vote count.
    if isinstance(inc_votes, bool) or not isinstance(inc_votes, int):
        raise InvalidQuery()
    if abs(inc_votes) > MAX_VOTE_CHANGE:
        raise InvalidQuery()
    return inc_votes


def parse_comment_body(payload):
    if not isinstance(payload, dict):
        raise InvalidQuery()
    body = payload.get("body")
    author = payload.get("author")
    if not isinstance(body, str) or not body.strip():
        raise InvalidQuery()
    if not isinstance(author, str) or not author.strip():
        raise InvalidQuery()
    return body, author
