"""Rebuild the schema and load fixture data.

``data`` is a mapping with ``userData``, ``categoryData``, ``reviewData`` and
``commentData`` lists, the shape of the JSON files under ``tests/data``.
Comment rows point at reviews by their 1-based position in ``reviewData``,
which matches the generated ``review_id`` on a freshly created table.
"""
from datetime import datetime, timezone

from flask import current_app

from boardgames.extensions import cache, db
from boardgames.models import TABLE_CREATION_ORDER, Category, Comment, Review, User


def parse_timestamp(value):
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, (int, float)):
        return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def drop_tables():
    for model in reversed(TABLE_CREATION_ORDER):
        model.__table__.drop(db.engine, checkfirst=True)
        current_app.logger.debug("Table dropped: %s", model.__tablename__)


def create_tables():
    for model in TABLE_CREATION_ORDER:
        model.__table__.create(db.engine, checkfirst=True)
        current_app.logger.info("Table created: %s", model.__tablename__)


def _row_kwargs(row, timestamp_fields=("created_at",)):
    kwargs = dict(row)
    for field in timestamp_fields:
        if field in kwargs:
            kwargs[field] = parse_timestamp(kwargs[field])
        if kwargs.get(field) is None:
            kwargs.pop(field, None)
    return kwargs


def seed(data):
    db.session.remove()
    drop_tables()
    create_tables()

    db.session.add_all(User(**row) for row in data.get("userData", []))
    db.session.add_all(Category(**row) for row in data.get("categoryData", []))
    db.session.flush()

    reviews = [Review(**_row_kwargs(row)) for row in data.get("reviewData", [])]
    db.session.add_all(reviews)
    db.session.flush()

    db.session.add_all(Comment(**_row_kwargs(row)) for row in data.get("commentData", []))
    db.session.commit()
    # Cached listings would otherwise outlive the rows they were built from.
    cache.clear()

    current_app.logger.info(
        "Seeded %d users, %d categories, %d reviews, %d comments",
        len(data.get("userData", [])),
        len(data.get("categoryData", [])),
        len(reviews),
        len(data.get("commentData", [])),
    )
