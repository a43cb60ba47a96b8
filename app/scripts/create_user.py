"""
Create a user without going through the HTTP API. Run from project root:
  python -m app.scripts.create_user EMAIL PASSWORD
Example:
  python -m app.scripts.create_user alice@example.com your-secure-password
"""
import argparse
import logging
import sys

from pydantic import ValidationError

from app.core.database import SessionLocal, init_db
from app.core.errors import ConflictError
from app.core.security import PASSWORD_MAX_LEN, PASSWORD_MIN_LEN, hash_password
from app.schemas.auth import RegisterRequest
from app.services.users import create_user

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Decision Keeper user.")
    parser.add_argument("email", help="Email address (must be unique)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "--create-tables",
        action="store_true",
        help="Create missing tables before inserting the user",
    )
    args = parser.parse_args(argv)

    try:
        body = RegisterRequest.model_validate(
            {"email": args.email.strip(), "password": args.password}
        )
    except ValidationError as e:
        for err in e.errors():
            print(f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}", file=sys.stderr)
        return 1

    if args.create_tables:
        init_db()

    db = SessionLocal()
    try:
        user = create_user(db, body.email, hash_password(body.password))
    except ConflictError:
        print(f"User '{body.email}' already exists.", file=sys.stderr)
        return 1
    finally:
        db.close()
    print(f"Created user '{user.email}' (id={user.id}).")
    return 0


if __name__ == "__main__":
    sys.exit(main())
