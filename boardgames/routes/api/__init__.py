from flask import Blueprint, jsonify

from boardgames.routes.api.categories import api_category_bp
from boardgames.routes.api.comments import api_comment_bp
from boardgames.routes.api.reviews import api_review_bp
from boardgames.services.validators import SORTABLE_FIELDS, SORT_ORDERS

api_bp = Blueprint("api", __name__)
api_bp.register_blueprint(api_category_bp, url_prefix="/categories")
api_bp.register_blueprint(api_review_bp, url_prefix="/reviews")
api_bp.register_blueprint(api_comment_bp, url_prefix="/comments")

ENDPOINTS = {
    "GET /api": {
        "description": "serves a JSON representation of all the available endpoints of the api",
    },
    "GET /api/categories": {
        "description": "serves an array of all categories",
        "queries": [],
        "exampleResponse": {
            "categories": [{"slug": "strategy", "description": "Games that reward planning ahead"}],
        },
    },
    "GET /api/reviews": {
        "description": "serves an array of all reviews with their comment counts",
        "queries": {
            "category": "any existing category slug",
            "sort_by": list(SORTABLE_FIELDS),
            "order": list(SORT_ORDERS),
        },
        "exampleResponse": {
            "reviews": [
                {
                    "review_id": 1,
                    "title": "One Night Ultimate Werewolf",
                    "designer": "Akihisa Okui",
                    "owner": "happyamy2016",
                    "review_img_url": "https://images.pexels.com/photos/5350049/pexels-photo-5350049.jpeg",
                    "review_body": "We couldn't find the werewolf!",
                    "category": "hidden-roles",
                    "created_at": "2018-05-30T15:59:13.341000+00:00",
                    "votes": 0,
                    "comment_count": 6,
                }
            ]
        },
    },
    "GET /api/reviews/:review_id": {
        "description": "serves a single review with its comment count",
        "queries": [],
    },
    "PATCH /api/reviews/:review_id": {
        "description": "changes the votes of a review by inc_votes and serves the updated review",
        "body": {"inc_votes": "integer, may be negative; votes never drop below zero"},
    },
    "GET /api/reviews/:review_id/comments": {
        "description": "serves an array of the comments on a review, newest first",
        "queries": [],
    },
    "POST /api/reviews/:review_id/comments": {
        "description": "adds a comment to a review and serves the created comment",
        "body": {"body": "string", "author": "existing username"},
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes a comment, responding with no content",
    },
}


@api_bp.get("")
def list_endpoints():
    return jsonify({"endpoints": ENDPOINTS})
