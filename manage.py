#!/usr/bin/env python3
"""
Management commands for the invoice dashboard database.

Seeds dashboard users and customers, resets a user's password and
issues long-lived session tokens for scripted clients.  Passwords are
stored as PBKDF2-HMAC-SHA256 hashes (format "salthex$hashhex"); this
script never reads or reveals existing ones.

Usage:
    python manage.py create-user --name Admin --email admin@ex.com --password "NewStrongPass!234"
    python manage.py create-customer --name "Lee Robinson" --email lee@robinson.com
    python manage.py reset-password --email admin@ex.com
    python manage.py token --email admin@ex.com --days 365

If --password is omitted, you will be prompted to enter it securely.
Set DATABASE_URL to point at another SQLite file.
"""

import argparse
import asyncio
import getpass
import sys

from pydantic import ValidationError

from invoice_dashboard_api.app.core.db import init_db
from invoice_dashboard_api.app.core.logging_config import setup_logging
from invoice_dashboard_api.app.core.security import create_access_token
from invoice_dashboard_api.app.schemas.auth import UserCreate
from invoice_dashboard_api.app.schemas.customer import CustomerCreate
from invoice_dashboard_api.app.services.customer_service import CustomerService
from invoice_dashboard_api.app.services.user_service import UserService


def _read_password(args: argparse.Namespace) -> str:
    password = args.password or getpass.getpass("Enter NEW password: ")
    if not password:
        print("[!] Empty password is not allowed.", file=sys.stderr)
        sys.exit(1)
    return password


def create_user(args: argparse.Namespace) -> int:
    try:
        data = UserCreate(name=args.name, email=args.email, password=_read_password(args))
    except ValidationError as e:
        print(f"[!] Invalid user data: {e}", file=sys.stderr)
        return 1
    try:
        user = asyncio.run(UserService.create_user(data))
    except ValueError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 2
    print(f"[+] Created user {user.email} ({user.id})")
    return 0


def create_customer(args: argparse.Namespace) -> int:
    data = CustomerCreate(name=args.name, email=args.email, image_url=args.image_url)
    customer = asyncio.run(CustomerService.create_customer(data))
    print(f"[+] Created customer {customer.name} ({customer.id})")
    return 0


def reset_password(args: argparse.Namespace) -> int:
    try:
        asyncio.run(UserService.set_password(args.email, _read_password(args)))
    except ValueError as e:
        print(f"[!] {e}", file=sys.stderr)
        return 2
    print(f"[+] Password updated for user: {args.email}")
    return 0


def issue_token(args: argparse.Namespace) -> int:
    print(create_access_token({"sub": args.email}, expires_delta=args.days * 24 * 60 * 60))
    return 0


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(description="Invoice dashboard management commands.")
    sub = ap.add_subparsers(dest="command", required=True)

    p = sub.add_parser("create-user", help="Register a dashboard user")
    p.add_argument("--name", required=True)
    p.add_argument("--email", required=True)
    p.add_argument("--password", help="If omitted, you'll be prompted securely.")
    p.set_defaults(func=create_user)

    p = sub.add_parser("create-customer", help="Register a customer")
    p.add_argument("--name", required=True)
    p.add_argument("--email", required=True)
    p.add_argument("--image-url", dest="image_url")
    p.set_defaults(func=create_customer)

    p = sub.add_parser("reset-password", help="Set a new password for a user")
    p.add_argument("--email", required=True)
    p.add_argument("--password", help="If omitted, you'll be prompted securely.")
    p.set_defaults(func=reset_password)

    p = sub.add_parser("token", help="Print a long-lived session token")
    p.add_argument("--email", required=True)
    p.add_argument("--days", type=int, default=365)
    p.set_defaults(func=issue_token)

    return ap


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging()
    init_db()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
