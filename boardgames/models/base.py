from datetime import datetime, timezone

from boardgames.extensions import db


def utcnow():
    return datetime.now(timezone.utc)


class CreatedAtMixin:
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, default=utcnow, index=True)
