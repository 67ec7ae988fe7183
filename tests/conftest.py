from __future__ import annotations

import json
from pathlib import Path

import pytest

from boardgames import create_app
from boardgames.extensions import db
from boardgames.models import Review
from boardgames.seed import seed

TEST_DATA_PATH = Path(__file__).parent / "data" / "test_data.json"


@pytest.fixture(scope="session")
def test_data() -> dict:
    with TEST_DATA_PATH.open(encoding="utf-8") as handle:
        return json.load(handle)


@pytest.fixture
def app(test_data):
    app = create_app("testing")
    with app.app_context():
        seed(test_data)
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def stored_votes(app):
    def read(review_id: int) -> int:
        db.session.expire_all()
        return db.session.get(Review, review_id).votes

    return read
