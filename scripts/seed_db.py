#!/usr/bin/env python3
"""
Rebuild the board game reviews database from a JSON fixture file.

- Drops comments, reviews, categories and users (in that order).
- Recreates them in dependency order and inserts the fixture rows.

Usage:
  ./venv/bin/python scripts/seed_db.py --data tests/data/test_data.json
  FLASK_ENV=production ./venv/bin/python scripts/seed_db.py --data dev-data.json
"""

from __future__ import annotations

import argparse
import json
from pathlib import Path

from boardgames import create_app
from boardgames.seed import seed


def load_data(path: Path) -> dict:
    with path.open(encoding="utf-8") as handle:
        return json.load(handle)


def main() -> int:
    parser = argparse.ArgumentParser(description="Seed the board game reviews database.")
    parser.add_argument("--data", required=True, type=Path, help="Path to a JSON fixture file")
    parser.add_argument("--env", default=None, help="Config name (development, production, testing)")
    args = parser.parse_args()

    if not args.data.exists():
        parser.error(f"Data file not found: {args.data}")

    data = load_data(args.data)
    app = create_app(args.env)
    with app.app_context():
        seed(data)
    print(f"Seeded database from {args.data}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
