"""
SQLAlchemy Models Package

This package contains all database models for the Book Rental API.

There are no relationships between the tables: a Rental stores the user
and book identifiers as plain strings.

Import all models here to:
1. Make them available as: from rental_api.models import Book, Rental, User
2. Ensure Alembic discovers them for migrations
"""

from rental_api.models.book import Book
from rental_api.models.rental import Rental
from rental_api.models.user import User

__all__ = [
    "Book",
    "Rental",
    "User",
]
