from boardgames.extensions import db
from boardgames.models.base import CreatedAtMixin


class Comment(CreatedAtMixin, db.Model):
    __tablename__ = "comments"

    comment_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    body = db.Column(db.String, nullable=False)
    votes = db.Column(db.Integer, nullable=False, default=0, server_default="0")
    author = db.Column(db.String, db.ForeignKey("users.username", ondelete="CASCADE"), nullable=False, index=True)
    review_id = db.Column(
        db.Integer, db.ForeignKey("reviews.review_id", ondelete="CASCADE"), nullable=False, index=True
    )

    author_user = db.relationship("User", back_populates="comments")
    review = db.relationship("Review", back_populates="comments")

    __table_args__ = (db.CheckConstraint("votes >= 0", name="ck_comments_votes_non_negative"),)
