"""
API Routers Package

Router Structure:
- auth.py: /register and /login
- books.py: /books/* endpoints
- rentals.py: /rentals/* endpoints
- uploads.py: /uploads/{filename} stored cover images

Each router is imported and registered in main.py.
"""

from rental_api.routers.auth import router as auth_router
from rental_api.routers.books import router as books_router
from rental_api.routers.rentals import router as rentals_router
from rental_api.routers.uploads import router as uploads_router

__all__ = [
    "auth_router",
    "books_router",
    "rentals_router",
    "uploads_router",
]
