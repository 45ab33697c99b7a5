"""
Create a dashboard administrator. Run from project root:
  python -m app.scripts.create_admin USERNAME PASSWORD [--email EMAIL]
Example:
  python -m app.scripts.create_admin admin your-secure-password --email admin@logicspark.com
"""
import argparse
import logging
import sys

from app.core.config import get_settings
from app.core.database import SessionLocal
from app.core.errors import DuplicateIdentityError
from app.core.security import PASSWORD_MAX_LEN, USERNAME_MAX_LEN, PasswordHasher
from app.services.credentials import AccountStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Logic Spark admin (no registration UI).")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("--email", default=None, help="Contact email for the admin")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    hasher = PasswordHasher(rounds=get_settings().BCRYPT_ROUNDS)
    db = SessionLocal()
    try:
        admin = AccountStore.admins(db).create(
            username,
            hasher.hash(args.password),
            email=args.email,
        )
    except DuplicateIdentityError:
        print(f"Admin '{username}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created admin '%s' (id=%s)", admin.username, admin.id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
