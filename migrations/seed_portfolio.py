"""
Seed Script: initial admin user and portfolio content
Creates the admin account from ADMIN_EMAIL / ADMIN_PASSWORD / ADMIN_NAME and
fills every empty section with starter content. Safe to re-run.

Usage:
    python migrations/seed_portfolio.py [--update-contact]
"""

import os
import sys
import argparse

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app import create_app
from utils.data import get_store
from utils.seed import DEFAULT_CONTENT, seed_admin_user


def seed_sections(store):
    """Insert starter rows into each section that is still empty"""
    for section, rows in DEFAULT_CONTENT.items():
        if section == 'contact':
            continue
        if store.first(section) is not None:
            print(f"  {section}: already has content, skipping...")
            continue
        for fields in rows:
            store.insert(section, dict(fields))
        print(f"  [OK] Seeded {section} ({len(rows)} row(s))")


def seed_contact(store, update_existing):
    """Insert the contact record, or overwrite it in place when asked to"""
    fields = dict(DEFAULT_CONTENT['contact'][0])
    if store.first('contact') is None:
        store.insert('contact', fields)
        print("  [OK] Seeded contact")
    elif update_existing:
        store.upsert_singleton('contact', fields)
        print("  [OK] Updated contact with social links")
    else:
        print("  contact: already has content, skipping...")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Seed the portfolio database')
    parser.add_argument('--update-contact', action='store_true',
                        help='overwrite an existing contact record with the starter links')
    args = parser.parse_args(argv)

    app = create_app()
    with app.app_context():
        print("Seeding database...")
        if seed_admin_user():
            print(f"  [OK] Admin user created: {app.config['ADMIN_EMAIL']}")
        else:
            print("  Admin user exists or is not configured, skipping...")

        store = get_store()
        seed_sections(store)
        seed_contact(store, args.update_contact)

        print("\nDatabase seeding complete!")
        print("IMPORTANT: Change the admin password after first login.")


if __name__ == '__main__':
    main()
