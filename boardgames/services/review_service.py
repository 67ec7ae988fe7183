from flask import current_app
from sqlalchemy import update

from boardgames.errors import InvalidVoteChange, NotFound, ValueNotFound
from boardgames.extensions import db
from boardgames.models import Category, Review
from boardgames.services.review_query import build_review_query
from boardgames.services.validators import parse_vote_change, resolve_order, resolve_sort_by


class ReviewService:
    @staticmethod
    def _fetch(query):
        return [row._asdict() for row in db.session.execute(query)]

    @staticmethod
    def category_exists(slug):
        return db.session.get(Category, slug) is not None

    @staticmethod
    def review_exists(review_id):
        return db.session.get(Review, review_id) is not None

    @staticmethod
    def list_reviews(sort_by=None, order=None, category=None):
        sort_by = resolve_sort_by(sort_by)
        order = resolve_order(order)

        # An empty result alone cannot tell a missing category from an empty one.
        if category is not None and not ReviewService.category_exists(category):
            raise ValueNotFound()

        return ReviewService._fetch(build_review_query(sort_by, order, category=category))

    @staticmethod
    def get_review(review_id):
        rows = ReviewService._fetch(build_review_query(review_id=review_id))
        if not rows:
            raise NotFound(f"{review_id} not found")
        return rows[0]

    @staticmethod
    def update_votes(review_id, payload):
        inc_votes = parse_vote_change(payload)
        if inc_votes is None:
            return ReviewService.get_review(review_id)

        # Increment and floor check in one statement so concurrent changes cannot interleave.
        stmt = (
            update(Review)
            .where(Review.review_id == review_id, Review.votes + inc_votes >= 0)
            .values(votes=Review.votes + inc_votes)
            .execution_options(synchronize_session=False)
        )
        result = db.session.execute(stmt)
        if result.rowcount == 0:
            db.session.rollback()
            if not ReviewService.review_exists(review_id):
                raise NotFound(f"{review_id} not found")
            raise InvalidVoteChange()

        db.session.commit()
        current_app.logger.info("Review %s votes changed by %s", review_id, inc_votes)
        return ReviewService.get_review(review_id)
