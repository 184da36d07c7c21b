"""CLI for SuddenlySpaces: tables, demo data, accounts and the dev server."""

from __future__ import annotations

import argparse
import asyncio
import getpass
import logging
import sys

DEMO_PASSWORD = "password123"


async def cmd_init_db(args):
    """Create all tables."""
    from suddenlyspaces.db.engine import create_all

    await create_all()
    print("Database tables created")


async def cmd_create_user(args):
    """Create a single OWNER or TENANT account."""
    from suddenlyspaces.db.engine import async_session_factory, create_all
    from suddenlyspaces.db import crud
    from suddenlyspaces.models import UserRole
    from suddenlyspaces.services.auth import hash_password

    await create_all()

    password = args.password
    if not password:
        password = getpass.getpass("Password: ")
        confirm = getpass.getpass("Confirm password: ")
        if password != confirm:
            print("Passwords do not match")
            sys.exit(1)

    if len(password) < 8:
        print("Password must be at least 8 characters")
        sys.exit(1)

    async with async_session_factory() as db:
        if await crud.get_user_by_email(db, args.email):
            print(f"User '{args.email}' already exists")
            sys.exit(1)
        user = await crud.create_user(
            db, args.email, hash_password(password), UserRole(args.role), name=args.name,
        )

    print(f"User created: {user.email} (id={user.id}, role={user.role.value})")


async def cmd_seed(args):
    """Seed demo owners, tenants, listings and applications. Safe to re-run."""
    from suddenlyspaces.db.engine import async_session_factory, create_all
    from suddenlyspaces.db import crud
    from suddenlyspaces.models import UserRole, PropertyType, LeaseType, ApplicationStatus
    from suddenlyspaces.services.auth import hash_password

    await create_all()
    password_hash = hash_password(DEMO_PASSWORD)

    users = {}
    async with async_session_factory() as db:
        for email, name, role in [
            ("owner1@example.com", "John Property Owner", UserRole.OWNER),
            ("owner2@example.com", "Sarah Real Estate", UserRole.OWNER),
            ("tenant1@example.com", "Mike Renter", UserRole.TENANT),
            ("tenant2@example.com", "Lisa Apartment Hunter", UserRole.TENANT),
        ]:
            user = await crud.get_user_by_email(db, email)
            if not user:
                user = await crud.create_user(db, email, password_hash, role, name=name)
            users[email] = user

        owner1, owner2 = users["owner1@example.com"], users["owner2@example.com"]
        tenant1, tenant2 = users["tenant1@example.com"], users["tenant2@example.com"]

        existing = await crud.list_applications_for_owner(db, owner1.id)
        if existing:
            print("Demo data already present, skipping listings")
            return

        downtown = await crud.create_property(
            db, owner1.id,
            title="Modern Downtown Apartment",
            description="Beautiful 2-bedroom apartment in the heart of downtown. Recently renovated with modern amenities.",
            location="123 Main Street",
            city="New York",
            rent_amount=2500,
            property_type=PropertyType.RESIDENTIAL,
            lease_type=LeaseType.MONTHLY,
        )
        coworking = await crud.create_property(
            db, owner2.id,
            title="Cozy Coworking Space",
            description="Professional coworking space with high-speed internet, meeting rooms, and coffee bar.",
            location="456 Business Ave",
            city="San Francisco",
            rent_amount=800,
            property_type=PropertyType.COWORKING,
            lease_type=LeaseType.FLEXIBLE,
        )
        await crud.create_property(
            db, owner1.id,
            title="Luxury Short-term Rental",
            description="Stunning vacation rental with ocean views. Perfect for weekend getaways.",
            location="789 Beach Blvd",
            city="Miami",
            rent_amount=300,
            property_type=PropertyType.SHORT_TERM,
            lease_type=LeaseType.FLEXIBLE,
        )

        await crud.create_application(db, downtown.id, tenant1.id, risk_score=75)
        await crud.create_application(
            db, coworking.id, tenant2.id, risk_score=85, status=ApplicationStatus.APPROVED,
        )

    print("Database seeded successfully")
    for email in users:
        print(f"  {email} (password: {DEMO_PASSWORD})")


def cmd_serve(args):
    import uvicorn

    uvicorn.run("suddenlyspaces.main:app", host=args.host, port=args.port, reload=args.reload)


def main():
    parser = argparse.ArgumentParser(description="SuddenlySpaces CLI")
    subparsers = parser.add_subparsers(dest="command")

    subparsers.add_parser("init-db", help="Create database tables")
    subparsers.add_parser("seed", help="Seed demo users, listings and applications")

    cu = subparsers.add_parser("create-user", help="Create an owner or tenant account")
    cu.add_argument("--email", required=True)
    cu.add_argument("--name", default=None)
    cu.add_argument("--role", choices=["OWNER", "TENANT"], required=True)
    cu.add_argument("--password", default="", help="Prompted if omitted")

    sv = subparsers.add_parser("serve", help="Run the API with uvicorn")
    sv.add_argument("--host", default="127.0.0.1")
    sv.add_argument("--port", type=int, default=8000)
    sv.add_argument("--reload", action="store_true")

    args = parser.parse_args()

    from suddenlyspaces.config import get_settings
    logging.basicConfig(level=get_settings().log_level.upper())

    if args.command == "init-db":
        asyncio.run(cmd_init_db(args))
    elif args.command == "seed":
        asyncio.run(cmd_seed(args))
    elif args.command == "create-user":
        asyncio.run(cmd_create_user(args))
    elif args.command == "serve":
        cmd_serve(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
