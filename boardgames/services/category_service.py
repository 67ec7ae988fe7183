from boardgames.models import Category


class CategoryService:
    @staticmethod
    def list_categories():
        return Category.query.order_by(Category.slug).all()
