"""
Create a user (e.g. first admin). Run from project root:
  python -m showcase.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m showcase.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import sys

from showcase.core.config import get_settings
from showcase.core.database import SessionLocal, init_db
from showcase.core.errors import ShowcaseError
from showcase.models import Role
from showcase.services.credentials import CredentialStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Showcase user (bypasses role self-assignment settings).")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email address")
    parser.add_argument("password", help="Password (6-128 chars)")
    parser.add_argument("role", nargs="?", default=Role.USER.value, choices=[r.value for r in Role])
    args = parser.parse_args(argv)

    settings = get_settings().model_copy(update={"ALLOW_ROLE_SELF_ASSIGNMENT": True})
    if settings.AUTO_CREATE_TABLES:
        init_db()
    db = SessionLocal()
    try:
        _, user = CredentialStore(db, settings).register(
            username=args.username,
            email=args.email,
            password=args.password,
            role=args.role,
        )
    except ShowcaseError as e:
        print(e.message, file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.username}' with role '{user.role.value}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
