"""Utility script to register a user directly in the data file."""

from __future__ import annotations

import argparse
from getpass import getpass

from app.application.use_cases.users import register_user
from app.infrastructure.datastore import initialize_datastore


def parse_args() -> argparse.Namespace:
    """Parse command line arguments for user creation."""

    parser = argparse.ArgumentParser(
        description="Register a user for the Taskly API without going through HTTP.",
    )
    parser.add_argument("--full-name", required=True, help="Full name of the user")
    parser.add_argument("--email", required=True, help="Email address used to log in")
    parser.add_argument("--phone", default=None, help="Phone number (optional)")
    parser.add_argument(
        "--password",
        default=None,
        help="Password for the user. Prompted interactively when omitted.",
    )
    return parser.parse_args()


def main() -> None:
    """Create a user using the provided command line arguments."""

    args = parse_args()

    password = args.password or getpass("Password: ")
    if not password:
        raise SystemExit("No password provided.")

    store = initialize_datastore()
    try:
        user = register_user(
            store,
            full_name=args.full_name,
            email=args.email,
            phone_number=args.phone,
            password=password,
        )
    except ValueError as exc:
        raise SystemExit(f"Could not create the user: {exc}") from exc

    print(
        "User created:\n"
        f"  ID: {user.id}\n"
        f"  Name: {user.full_name}\n"
        f"  Email: {user.email}"
    )


if __name__ == "__main__":
    main()
