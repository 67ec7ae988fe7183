from boardgames.extensions import db


class User(db.Model):
    __tablename__ = "users"

    username = db.Column(db.String, primary_key=True)
    name = db.Column(db.String(40), nullable=False)
    avatar_url = db.Column(db.String, nullable=True)

    reviews = db.relationship(
        "Review", back_populates="owner_user", cascade="all, delete", passive_deletes=True, lazy="dynamic"
    )
    comments = db.relationship(
        "Comment", back_populates="author_user", cascade="all, delete", passive_deletes=True, lazy="dynamic"
    )
