"""
Tests for the Database store handle and application lifecycle.
"""

import logging

from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy import inspect, select
from sqlalchemy.pool import StaticPool

from rental_api import main
from rental_api.config import DEFAULT_JWT_SECRET, Settings
from rental_api.database import Database, generate_id
from rental_api.main import app
from rental_api.models import Book
from rental_api.services import ContentStore


class TestDatabaseHandle:
    def test_in_memory_sqlite_uses_static_pool(self):
        database = Database("sqlite:///:memory:")

        assert isinstance(database.engine.pool, StaticPool)
        database.close()

    def test_create_tables(self):
        database = Database("sqlite://")
        database.create_tables()

        tables = set(inspect(database.engine).get_table_names())

        assert {"users", "books", "rentals"} <= tables
        database.close()

    def test_session_round_trip(self, tmp_path):
        database = Database(f"sqlite:///{tmp_path / 'rentals.db'}")
        database.create_tables()

        with database.session() as session:
            session.add(Book(title="Dune", author="Herbert", genre="SciFi"))
            session.commit()

        with database.session() as session:
            book = session.execute(select(Book)).scalar_one()
            assert book.title == "Dune"
            assert book.available is True
            assert len(book.id) == 32

        database.close()

    def test_generate_id_is_unique(self):
        assert generate_id() != generate_id()


class TestLifespan:
    def test_store_handles_attached_on_startup(self, client):
        assert isinstance(app.state.database, Database)
        assert isinstance(app.state.content_store, ContentStore)

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["status"] == "healthy"

    def test_default_secret_warning_in_production(self, monkeypatch, caplog):
        production = Settings(
            _env_file=None,
            environment="production",
            database_url="sqlite://",
            jwt_secret=DEFAULT_JWT_SECRET,
        )
        monkeypatch.setattr(main, "settings", production)
        caplog.set_level(logging.WARNING, logger="rental_api.main")

        with TestClient(app):
            pass

        assert any(
            record.levelno == logging.WARNING and "default secret" in record.getMessage()
            for record in caplog.records
        )

    def test_no_default_secret_warning_in_development(self, monkeypatch, caplog):
        development = Settings(
            _env_file=None,
            environment="development",
            database_url="sqlite://",
            jwt_secret=DEFAULT_JWT_SECRET,
        )
        monkeypatch.setattr(main, "settings", development)
        caplog.set_level(logging.WARNING, logger="rental_api.main")

        with TestClient(app):
            pass

        assert not any("default secret" in record.getMessage() for record in caplog.records)
