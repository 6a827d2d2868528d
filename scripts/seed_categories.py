#!/usr/bin/env python3
"""
Insert spending categories; names that already exist are skipped.

    python scripts/seed_categories.py Groceries Rent Transport
    python scripts/seed_categories.py --defaults
"""

import argparse
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("scpp.scripts.seed_categories")

DEFAULT_CATEGORIES = [
    "Groceries",
    "Housing",
    "Utilities",
    "Transport",
    "Health",
    "Leisure",
    "Salary",
    "Other",
]


def main():
    p = argparse.ArgumentParser(description="Seed SCPP categories (idempotent).")
    p.add_argument("names", nargs="*", help="Category descriptions, in display order")
    p.add_argument(
        "--defaults", action="store_true", help="Seed the built-in category list"
    )
    args = p.parse_args()

    names = args.names or (DEFAULT_CATEGORIES if args.defaults else [])
    if not names:
        p.error("give category names or --defaults")

    from domain.models import SessionLocal, init_database
    from services.category_service import CategoryService

    init_database()
    with SessionLocal() as db:
        existing = {c.description.lower() for c in CategoryService.list_categories(db)}
        next_order = len(existing)
        for name in names:
            if name.lower() in existing:
                logger.info("Skipping existing category %r", name)
                continue
            next_order += 1
            CategoryService.create_category(db, name, sort_order=next_order)
            existing.add(name.lower())
            logger.info("Added category %r (sort_order=%d)", name, next_order)


if __name__ == "__main__":
    main()
