"""
Book Rental API Package

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: Store handle (engine + sessions) and session dependency
- exceptions.py: Domain errors mapped to HTTP responses
- main.py: FastAPI application factory and configuration
- dependencies.py: Dependency injection functions
- models/: SQLAlchemy ORM models
- schemas/: Pydantic request/response schemas
- routers/: API route handlers
- services/: Business logic (identity, catalog, rentals, content store)
"""

__version__ = "0.1.0"
