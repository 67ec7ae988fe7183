from flask import Blueprint, jsonify

from boardgames.extensions import cache
from boardgames.routes.api.serializers import category_to_dict
from boardgames.services import CategoryService

api_category_bp = Blueprint("api_category", __name__)

CATEGORIES_CACHE_TIMEOUT = 30


@api_category_bp.get("")
@cache.cached(timeout=CATEGORIES_CACHE_TIMEOUT)
def list_categories():
    categories = CategoryService.list_categories()
    return jsonify({"categories": [category_to_dict(c) for c in categories]})
