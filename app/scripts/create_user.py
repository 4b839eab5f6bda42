"""
Create a user (e.g. first admin). Run from project root:
  python -m app.scripts.create_user EMAIL NAME [role] [--token]
Example:
  python -m app.scripts.create_user admin@example.com Admin admin --token
"""
import argparse
import sys

from app.core.database import SessionLocal
from app.core.security import ROLES, create_access_token
from app.crud import users as user_store

EMAIL_MAX_LEN = 255
NAME_MAX_LEN = 100


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a board user (no registration UI).")
    parser.add_argument("email", help="Email address (unique, 3-255 chars)")
    parser.add_argument("name", help="Display name (1-100 chars)")
    parser.add_argument("role", nargs="?", default="member", choices=list(ROLES))
    parser.add_argument(
        "--token",
        action="store_true",
        help="Also print an access token for the new user (local development).",
    )
    args = parser.parse_args(argv)

    email = args.email.strip().lower()
    name = args.name.strip()
    if "@" not in email or len(email) < 3 or len(email) > EMAIL_MAX_LEN:
        print("Invalid email address.", file=sys.stderr)
        return 1
    if not name or len(name) > NAME_MAX_LEN:
        print("Invalid name length.", file=sys.stderr)
        return 1

    db = SessionLocal()
    try:
        if user_store.find_by_email(db, email) is not None:
            print(f"User '{email}' already exists.", file=sys.stderr)
            return 1
        user = user_store.create(db, email=email, name=name, role=args.role)
        print(f"Created user '{user.email}' with role '{user.role}'.")
        if args.token:
            print(create_access_token(user.email, user.role))
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
