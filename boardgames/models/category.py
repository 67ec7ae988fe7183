from boardgames.extensions import db


class Category(db.Model):
    __tablename__ = "categories"

    slug = db.Column(db.String(40), primary_key=True)
    description = db.Column(db.String, nullable=False)

    reviews = db.relationship(
        "Review", back_populates="category_ref", cascade="all, delete", passive_deletes=True, lazy="dynamic"
    )
