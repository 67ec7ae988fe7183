from flask import Blueprint, jsonify, request

from boardgames.routes.api.payloads import json_body
from boardgames.routes.api.serializers import comment_to_dict, review_to_dict
from boardgames.services import CommentService, ReviewService
from boardgames.services.validators import parse_identifier

api_review_bp = Blueprint("api_review", __name__)


@api_review_bp.get("")
def list_reviews():
    reviews = ReviewService.list_reviews(
        sort_by=request.args.get("sort_by"),
        order=request.args.get("order"),
        category=request.args.get("category"),
    )
    return jsonify({"reviews": [review_to_dict(r) for r in reviews]})


@api_review_bp.get("/<review_id>")
def get_review(review_id):
    review = ReviewService.get_review(parse_identifier(review_id))
    return jsonify({"review": review_to_dict(review)})


@api_review_bp.patch("/<review_id>")
def patch_review(review_id):
    review_id = parse_identifier(review_id)
    payload = json_body()
    review = ReviewService.update_votes(review_id, payload)
    return jsonify({"review": review_to_dict(review)})


@api_review_bp.get("/<review_id>/comments")
def list_review_comments(review_id):
    comments = CommentService.list_for_review(parse_identifier(review_id))
    return jsonify({"comments": [comment_to_dict(c) for c in comments]})


@api_review_bp.post("/<review_id>/comments")
def add_review_comment(review_id):
    review_id = parse_identifier(review_id)
    payload = json_body()
    comment = CommentService.create_comment(review_id, payload)
    return jsonify({"msg": "comment created", "comment": comment_to_dict(comment)}), 201
