"""
Services Package

Business logic, kept separate from HTTP handling (routers):
- catalog.py: Book create/list/update/delete
- identity.py: User registration and login
- rentals.py: Rental creation and return
- security.py: Password hashing and credential utilities
- storage.py: Content store for uploaded cover images

Services take an explicit SQLAlchemy session (and, for the catalog, a
content store) and raise ``rental_api.exceptions`` errors; they never
build HTTP responses.
"""

from rental_api.services.catalog import CatalogService
from rental_api.services.identity import IdentityService
from rental_api.services.rentals import RentalService
from rental_api.services.storage import ContentStore

__all__ = [
    "CatalogService",
    "ContentStore",
    "IdentityService",
    "RentalService",
]
