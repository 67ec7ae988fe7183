from dataclasses import dataclass

from flask import jsonify
from sqlalchemy.exc import DataError, IntegrityError, SQLAlchemyError, StatementError

from boardgames.extensions import db

CLIENT_INPUT = "client_input"
MISSING_RESOURCE = "missing_resource"
INTERNAL = "internal"

STATUS_BY_CATEGORY = {
    CLIENT_INPUT: 400,
    MISSING_RESOURCE: 404,
    INTERNAL: 500,
}


class AppError(Exception):
    kind = "AppError"
    category = INTERNAL
    default_message = "Internal server error"

    def __init__(self, message=None):
        self.message = message or self.default_message
        super().__init__(self.message)


class InvalidQuery(AppError):
    kind = "InvalidQuery"
    category = CLIENT_INPUT
    default_message = "Invalid query"


class InvalidSortBy(AppError):
    kind = "InvalidSortBy"
    category = CLIENT_INPUT
    default_message = "Invalid sort_by query"


class InvalidOrder(AppError):
    kind = "InvalidOrder"
    category = CLIENT_INPUT
    default_message = "Invalid order query"


class InvalidVoteChange(AppError):
    kind = "InvalidVoteChange"
    category = CLIENT_INPUT
    default_message = "Change would result in invalid value"


class NotFound(AppError):
    kind = "NotFound"
    category = MISSING_RESOURCE
    default_message = "not found"


class ValueNotFound(AppError):
    kind = "ValueNotFound"
    category = MISSING_RESOURCE
    default_message = "value not found"


@dataclass(frozen=True)
class ClassifiedError:
    kind: str
    message: str
    category: str

    @property
    def status_code(self) -> int:
        return STATUS_BY_CATEGORY[self.category]

    def to_dict(self):
        return {"msg": self.message, "kind": self.kind}


def classify_error(exc: Exception) -> ClassifiedError:
    """Reduce any failure raised while serving a request to a kind, a message and an error class."""
    if isinstance(exc, AppError):
        return ClassifiedError(exc.kind, exc.message, exc.category)
    # Storage-side coercion failures mean the caller sent a malformed value.
    if isinstance(exc, (DataError, OverflowError)):
        return _from_error_class(InvalidQuery)
    # Bind-parameter conversion failures surface wrapped, before reaching the database.
    if isinstance(exc, StatementError) and isinstance(exc.orig, (OverflowError, ValueError)):
        return _from_error_class(InvalidQuery)
    # Foreign-key violations: the referenced row does not exist.
    if isinstance(exc, IntegrityError):
        return _from_error_class(ValueNotFound)
    return ClassifiedError("Unclassified", "Internal server error", INTERNAL)


def _from_error_class(error_class):
    return ClassifiedError(error_class.kind, error_class.default_message, error_class.category)


def register_error_handlers(app):
    def respond(classified):
        return jsonify(classified.to_dict()), classified.status_code

    @app.errorhandler(AppError)
    def handle_app_error(err):
        classified = classify_error(err)
        app.logger.info("%s: %s", classified.kind, classified.message)
        return respond(classified)

    @app.errorhandler(SQLAlchemyError)
    def handle_storage_error(err):
        db.session.rollback()
        classified = classify_error(err)
        if classified.category == INTERNAL:
            app.logger.exception("Unclassified storage error")
        else:
            app.logger.warning("Storage error classified as %s", classified.kind)
        return respond(classified)

    @app.errorhandler(OverflowError)
    def handle_overflow(err):
        db.session.rollback()
        classified = classify_error(err)
        app.logger.warning("Value out of storage range: %s", err)
        return respond(classified)

    @app.errorhandler(400)
    def bad_request(_err):
        return jsonify({"msg": "Bad request"}), 400

    @app.errorhandler(404)
    def not_found(_err):
        return jsonify({"msg": "Path not found"}), 404

    @app.errorhandler(405)
    def method_not_allowed(_err):
        return jsonify({"msg": "Method not allowed"}), 405

    @app.errorhandler(429)
    def too_many_requests(_err):
        return jsonify({"msg": "Too many requests"}), 429

    @app.errorhandler(500)
    def server_error(_err):
        app.logger.exception("Internal server error")
        return jsonify({"msg": "Internal server error", "kind": "Unclassified"}), 500
