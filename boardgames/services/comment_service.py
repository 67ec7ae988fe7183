from flask import current_app

from boardgames.errors import ValueNotFound
from boardgames.extensions import db
from boardgames.models import Comment, Review, User
from boardgames.services.validators import parse_comment_body


class CommentService:
    @staticmethod
    def list_for_review(review_id):
        if db.session.get(Review, review_id) is None:
            raise ValueNotFound()
        return (
            Comment.query.filter_by(review_id=review_id)
            .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
            .all()
        )

    @staticmethod
    def create_comment(review_id, payload):
        body, author = parse_comment_body(payload)

        if db.session.get(Review, review_id) is None:
            raise ValueNotFound()
        if db.session.get(User, author) is None:
            raise ValueNotFound()

        comment = Comment(body=body, author=author, review_id=review_id, votes=0)
        db.session.add(comment)
        db.session.commit()
        current_app.logger.info("Comment %s created on review %s by %s", comment.comment_id, review_id, author)
        return comment

    @staticmethod
    def delete_comment(comment_id):
        deleted = Comment.query.filter_by(comment_id=comment_id).delete(synchronize_session=False)
        db.session.commit()
        if deleted:
            current_app.logger.info("Comment %s deleted", comment_id)
        return bool(deleted)
