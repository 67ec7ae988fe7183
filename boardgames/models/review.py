from boardgames.extensions import db
from boardgames.models.base import CreatedAtMixin

DEFAULT_REVIEW_IMG_URL = (
    "https://images.pexels.com/photos/163064/play-stone-network-networked-interactive-163064.jpeg"
)


class Review(CreatedAtMixin, db.Model):
    __tablename__ = "reviews"

    review_id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    title = db.Column(db.String, nullable=False)
    designer = db.Column(db.String(40), nullable=False)
    owner = db.Column(db.String, db.ForeignKey("users.username", ondelete="CASCADE"), nullable=False, index=True)
    review_img_url = db.Column(
        db.String, nullable=False, default=DEFAULT_REVIEW_IMG_URL, server_default=DEFAULT_REVIEW_IMG_URL
    )
    review_body = db.Column(db.String, nullable=False)
    category = db.Column(
        db.String(40), db.ForeignKey("categories.slug", ondelete="CASCADE"), nullable=False, index=True
    )
    votes = db.Column(db.Integer, nullable=False, default=0, server_default="0")

    owner_user = db.relationship("User", back_populates="reviews")
    category_ref = db.relationship("Category", back_populates="reviews")
    comments = db.relationship(
        "Comment", back_populates="review", cascade="all, delete", passive_deletes=True, lazy="dynamic"
    )

    __table_args__ = (db.CheckConstraint("votes >= 0", name="ck_reviews_votes_non_negative"),)
