from flask import Blueprint

from boardgames.errors import NotFound
from boardgames.services import CommentService
from boardgames.services.validators import parse_identifier

api_comment_bp = Blueprint("api_comment", __name__)


@api_comment_bp.delete("/<comment_id>")
def delete_comment(comment_id):
    comment_id = parse_identifier(comment_id)
    if not CommentService.delete_comment(comment_id):
        raise NotFound(f"comment {comment_id} not found")
    return "", 204
