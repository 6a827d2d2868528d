#!/usr/bin/env python3
"""
Create a login account.

    python scripts/create_user.py --email me@example.com --password secret
"""

import argparse
import getpass
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

logging.basicConfig(
    level=logging.INFO, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger("scpp.scripts.create_user")


def main():
    p = argparse.ArgumentParser(description="Create an SCPP login user.")
    p.add_argument("--email", required=True, help="Login name (email address)")
    p.add_argument(
        "--password", help="Password; prompted for when omitted"
    )
    args = p.parse_args()

    password = args.password or getpass.getpass("Password: ")

    from app.exceptions import ServiceValidationError
    from domain.models import SessionLocal, init_database
    from services.session_service import SessionService

    init_database()
    with SessionLocal() as db:
        try:
            user = SessionService.create_user(db, args.email, password)
        except ServiceValidationError as e:
            logger.error(str(e))
            sys.exit(2)
    logger.info("Created user %s (id=%s)", user.email, user.user_id)


if __name__ == "__main__":
    main()
