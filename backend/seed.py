#!/usr/bin/env python3
"""
Provision the admin identity.

Creates the admin user from settings, or resets its name and password if
the email already exists. Run after run_migrations.py.

Usage:
    python seed.py
    python seed.py --email ops@example.com --password 's3cret'

Configuration (defaults shown):
    CATALOG_SEED_ADMIN_NAME="Admin User"
    CATALOG_SEED_ADMIN_EMAIL=admin@example.com
    CATALOG_SEED_ADMIN_PASSWORD=password123
"""

import argparse
import sys

from rich.console import Console

from modules.auth.repository import UserRepository
from modules.auth.service import hash_password
from shared.config import get_settings
from shared.database import get_supabase_client
from shared.exceptions import StorageError

console = Console()


def seed_admin(repository: UserRepository, name: str, email: str, password: str):
    """Create or update the admin identity and return it."""
    return repository.upsert(name=name, email=email, password_hash=hash_password(password))


def main():
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Create or reset the admin user")
    parser.add_argument("--name", default=settings.seed_admin_name)
    parser.add_argument("--email", default=settings.seed_admin_email)
    parser.add_argument("--password", default=settings.seed_admin_password)
    args = parser.parse_args()

    try:
        repository = UserRepository(get_supabase_client())
        user = seed_admin(repository, args.name, args.email, args.password)
    except (RuntimeError, StorageError) as e:
        console.print(f"[red]Error:[/red] {e}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Admin user ready: {user.email} (id {user.id})")


if __name__ == "__main__":
    main()
