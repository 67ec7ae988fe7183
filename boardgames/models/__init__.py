from boardgames.models.category import Category
from boardgames.models.comment import Comment
from boardgames.models.review import DEFAULT_REVIEW_IMG_URL, Review
from boardgames.models.user import User

# Dependency order: every table only references tables listed before it.
TABLE_CREATION_ORDER = (User, Category, Review, Comment)

__all__ = [
    "User",
    "Category",
    "Review",
    "Comment",
    "DEFAULT_REVIEW_IMG_URL",
    "TABLE_CREATION_ORDER",
]
