from sqlalchemy import func, select

from boardgames.models import Comment, Review
from boardgames.services.validators import DEFAULT_ORDER, DEFAULT_SORT_BY, REVIEW_COLUMNS

comment_count = func.count(Comment.comment_id).label("comment_count")

# Whitelisted sort tokens resolve to server-side column objects only.
SORT_COLUMNS = {name: Review.__table__.c[name] for name in REVIEW_COLUMNS}
SORT_COLUMNS["comment_count"] = comment_count


def build_review_query(sort_by=DEFAULT_SORT_BY, order=DEFAULT_ORDER, category=None, review_id=None):
    """Reviews with their comment counts, filtered and ordered.

    ``sort_by`` and ``order`` must already have passed the whitelist; any
    filter value is sent as a bound parameter.
    """
    sort_column = SORT_COLUMNS[sort_by]
    query = (
        select(*(Review.__table__.c[name] for name in REVIEW_COLUMNS), comment_count)
        .select_from(Review)
        .outerjoin(Comment, Comment.review_id == Review.review_id)
        .group_by(Review.review_id)
    )
    if category is not None:
        query = query.where(Review.category == category)
    if review_id is not None:
        query = query.where(Review.review_id == review_id)
    return query.order_by(sort_column.asc() if order == "asc" else sort_column.desc())
