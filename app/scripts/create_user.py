"""
Create a user directly in the store (e.g. the first admin). Run from project root:
  python -m app.scripts.create_user USERNAME EMAIL PASSWORD [role]
Example:
  python -m app.scripts.create_user admin admin@example.com your-secure-password admin
"""
import argparse
import sys

from app.core.config import get_settings
from app.core.database import session_scope
from app.core.security import EMAIL_MAX_LEN, PASSWORD_MAX_LEN, USERNAME_MAX_LEN, hash_password
from app.schemas.user import UserCreate
from app.services.errors import DuplicateEmailError
from app.services.user_store import SqlUserStore


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a MythoMaps user, optionally with the admin role.")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("email", help="Email (unique)")
    parser.add_argument("password", help="Password (1-128 chars)")
    parser.add_argument("role", nargs="?", default="user", choices=["user", "admin"])
    args = parser.parse_args(argv)

    username = args.username.strip()
    email = args.email.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not email or len(email) > EMAIL_MAX_LEN:
        print("Invalid email length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    settings = get_settings()
    with session_scope() as db:
        store = SqlUserStore(db)
        if store.find_by_email(email) is not None:
            print(f"A user with email '{email}' already exists.", file=sys.stderr)
            return 1
        try:
            record = store.save(
                UserCreate(
                    username=username,
                    email=email,
                    password_hash=hash_password(args.password, settings.BCRYPT_ROUNDS),
                    photo=settings.DEFAULT_PHOTO_URL,
                    role=args.role,
                )
            )
        except DuplicateEmailError:
            print(f"A user with email '{email}' already exists.", file=sys.stderr)
            return 1
    print(f"Created user '{username}' (id={record.id}) with role '{args.role}'.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
