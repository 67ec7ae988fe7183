from flask import request

from boardgames.errors import InvalidQuery


def json_body():
    """The request's JSON body; ``{}`` only when no body was sent at all.

    Non-object JSON values are returned as parsed so the caller's own
    validation rejects them.
    """
    if not request.get_data(cache=True):
        return {}
    payload = request.get_json(silent=True)
    # Unparseable JSON and non-JSON content types both come back as None, as does a literal null.
    if payload is None:
        raise InvalidQuery()
    return payload
