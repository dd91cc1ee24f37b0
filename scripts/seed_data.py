#!/usr/bin/env python3
"""
Database Seed Script

Populates the database with sample books and one demo user for
development.

USAGE:
    # From the project root with the package installed
    python scripts/seed_data.py

    # Keep existing rows instead of clearing them first
    python scripts/seed_data.py --keep

This script:
1. Connects to the database using app settings
2. Clears existing data (optional)
3. Creates sample books and a demo user
"""

import argparse

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from rental_api.config import get_settings
from rental_api.database import Database
from rental_api.models import Book, Rental, User
from rental_api.services.security import hash_password

BOOKS = [
    {"title": "Dune", "author": "Frank Herbert", "genre": "SciFi"},
    {"title": "Foundation", "author": "Isaac Asimov", "genre": "SciFi"},
    {"title": "Neuromancer", "author": "William Gibson", "genre": "SciFi"},
    {"title": "The Hobbit", "author": "J.R.R. Tolkien", "genre": "Fantasy"},
    {"title": "A Wizard of Earthsea", "author": "Ursula K. Le Guin", "genre": "Fantasy"},
    {"title": "The Name of the Wind", "author": "Patrick Rothfuss", "genre": "Fantasy"},
    {"title": "Murder on the Orient Express", "author": "Agatha Christie", "genre": "Mystery"},
    {"title": "The Hound of the Baskervilles", "author": "Arthur Conan Doyle", "genre": "Mystery"},
    {"title": "Pride and Prejudice", "author": "Jane Austen", "genre": "Classic"},
    {"title": "1984", "author": "George Orwell", "genre": "Classic"},
    {"title": "The Old Man and the Sea", "author": "Ernest Hemingway", "genre": "Classic"},
    {"title": "Brave New World", "author": "Aldous Huxley", "genre": "Classic"},
]

DEMO_USER = {
    "name": "Demo Reader",
    "email": "demo@example.com",
    "password": "demo-password",
}


def clear_data(db: Session) -> None:
    """Clear all existing data from the database."""
    print("Clearing existing data...")
    db.execute(delete(Rental))
    db.execute(delete(Book))
    db.execute(delete(User))
    db.commit()
    print("Data cleared.")


def create_books(db: Session) -> list[Book]:
    """Create sample books."""
    print("Creating books...")
    books = [Book(**data) for data in BOOKS]
    for book in books:
        db.add(book)
        db.flush()
    db.commit()
    print(f"Created {len(books)} books.")
    return books


def create_demo_user(db: Session) -> User:
    existing = db.execute(
        select(User).where(User.email == DEMO_USER["email"])
    ).scalar_one_or_none()
    if existing is not None:
        print(f"Demo user {existing.email} already exists.")
        return existing

    print("Creating demo user...")
    user = User(
        name=DEMO_USER["name"],
        email=DEMO_USER["email"],
        hashed_password=hash_password(DEMO_USER["password"]),
    )
    db.add(user)
    db.commit()
    print(f"Created user {user.email} (password: {DEMO_USER['password']})")
    return user


def seed_database(clear_existing: bool = True) -> None:
    """
    Seed the database with sample data.

    Args:
        clear_existing: If True, clears existing data before seeding.
    """
    settings = get_settings()

    print("=" * 60)
    print("Starting database seed...")
    print("=" * 60)

    database = Database(settings.database_url)
    database.create_tables()
    db = database.session()

    try:
        if clear_existing:
            clear_data(db)

        books = create_books(db)
        create_demo_user(db)

        print("=" * 60)
        print("Database seeding completed successfully!")
        print("=" * 60)
        print(f"\nSummary:")
        print(f"  - Books: {len(books)}")
        print(f"  - Users: 1")
        print(f"\nYou can now access the API at http://localhost:{settings.port}")
        print(f"API documentation at http://localhost:{settings.port}/docs")

    except Exception as e:
        print(f"Error seeding database: {e}")
        db.rollback()
        raise
    finally:
        db.close()
        database.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Seed the rental database")
    parser.add_argument(
        "--keep",
        action="store_true",
        help="Keep existing rows instead of clearing them first",
    )
    args = parser.parse_args()
    seed_database(clear_existing=not args.keep)
