"""
Create a user (e.g. the first admin). Run from project root:
  python -m wastetrack.scripts.create_user USERNAME PASSWORD [role] [--name "Full Name"]
Example:
  python -m wastetrack.scripts.create_user admin your-secure-password admin --name "Administrador"
"""
import argparse
import sys

from wastetrack.core.database import SessionLocal
from wastetrack.core.security import hash_password
from wastetrack.models import User

PASSWORD_MIN_LEN = 8
PASSWORD_MAX_LEN = 128


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Waste Tracker user (no registration UI).")
    parser.add_argument("username", help="Username (1-255 chars)")
    parser.add_argument("password", help=f"Password ({PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument("role", nargs="?", default="operator", choices=["operator", "admin"])
    parser.add_argument("--name", default="", help="Display name shown after login")
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > 255:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not (PASSWORD_MIN_LEN <= len(args.password) <= PASSWORD_MAX_LEN):
        print(
            f"Password must be {PASSWORD_MIN_LEN}-{PASSWORD_MAX_LEN} characters.",
            file=sys.stderr,
        )
        return 1

    db = SessionLocal()
    try:
        existing = db.query(User).filter(User.username == username).first()
        if existing:
            print(f"User '{username}' already exists.", file=sys.stderr)
            return 1
        user = User(
            username=username,
            password_hash=hash_password(args.password),
            role=args.role,
            full_name=args.name.strip(),
        )
        db.add(user)
        db.commit()
        print(f"Created user '{username}' with role '{args.role}'.")
        return 0
    finally:
        db.close()


if __name__ == "__main__":
    sys.exit(main())
