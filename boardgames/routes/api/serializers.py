from datetime import timezone


def isoformat(value):
    if value is None:
        return None
    # SQLite hands back naive datetimes; they were written as UTC.
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat()


def review_to_dict(review):
    return {**review, "created_at": isoformat(review["created_at"])}


def comment_to_dict(comment):
    return {
        "comment_id": comment.comment_id,
        "body": comment.body,
        "votes": comment.votes,
        "author": comment.author,
        "review_id": comment.review_id,
        "created_at": isoformat(comment.created_at),
    }


def category_to_dict(category):
    return {"slug": category.slug, "description": category.description}
