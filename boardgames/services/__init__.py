from boardgames.services.category_service import CategoryService
from boardgames.services.comment_service import CommentService
from boardgames.services.review_service import ReviewService

__all__ = [
    "CategoryService",
    "CommentService",
    "ReviewService",
]
