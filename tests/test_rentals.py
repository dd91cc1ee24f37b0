"""
Tests for Rental Endpoints

Covers the rental lifecycle for a (user, book) pair:
- None → Active on POST /rentals
- Active → Returned on PUT /rentals/{id}/return
- Returned → Active again with a new rental
"""

from datetime import datetime, timedelta

from fastapi import status

from rental_api.models import Rental
from rental_api.services import RentalService


class TestCreateRental:
    """Tests for POST /rentals"""

    def test_create_rental_success(self, client, sample_book):
        response = client.post("/rentals", json={"userId": "u1", "bookId": sample_book.id})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"]
        assert data["userId"] == "u1"
        assert data["bookId"] == sample_book.id
        assert data["returned"] is False
        assert data["returnDate"] is None
        assert data["rentalDate"] is not None

    def test_create_rental_duplicate_active(self, client, sample_book):
        """A second rental of the same book by the same user is rejected."""
        first = client.post("/rentals", json={"userId": "u1", "bookId": sample_book.id})
        assert first.status_code == status.HTTP_201_CREATED

        response = client.post("/rentals", json={"userId": "u1", "bookId": sample_book.id})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"message": "You have already rented this book"}

    def test_create_rental_after_return(self, client, active_rental):
        """Once the active rental is returned the pair can be rented again."""
        client.put(f"/rentals/{active_rental.id}/return")

        response = client.post(
            "/rentals",
            json={"userId": "u1", "bookId": active_rental.book_id},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] != active_rental.id
        assert data["returned"] is False

    def test_create_rental_other_user_same_book(self, client, active_rental):
        """The uniqueness rule is per pair, not per book."""
        response = client.post(
            "/rentals",
            json={"userId": "u2", "bookId": active_rental.book_id},
        )

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_rental_same_user_other_book(self, client, active_rental):
        response = client.post("/rentals", json={"userId": "u1", "bookId": "another-book"})

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_rental_unknown_ids_accepted(self, client):
        """User and book ids are not checked against existing records."""
        response = client.post("/rentals", json={"userId": "ghost", "bookId": "missing"})

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_rental_numeric_ids(self, client):
        response = client.post("/rentals", json={"userId": 7, "bookId": 42})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["userId"] == "7"
        assert data["bookId"] == "42"

    def test_create_rental_missing_book_id(self, client):
        response = client.post("/rentals", json={"userId": "u1"})

        assert response.status_code == status.HTTP_422_UNPROCESSABLE_ENTITY

    def test_create_rental_from_form(self, client, sample_book):
        response = client.post("/rentals", data={"userId": "u1", "bookId": sample_book.id})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["userId"] == "u1"
        assert data["bookId"] == sample_book.id
        assert data["returned"] is False

    def test_create_rental_from_form_duplicate_active(self, client, active_rental):
        response = client.post(
            "/rentals", data={"userId": "u1", "bookId": active_rental.book_id}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"message": "You have already rented this book"}


class TestReturnRental:
    """Tests for PUT /rentals/{rental_id}/return"""

    def test_return_rental_success(self, client, active_rental):
        response = client.put(f"/rentals/{active_rental.id}/return")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["message"] == "Book returned successfully"
        assert data["rental"]["id"] == active_rental.id
        assert data["rental"]["returned"] is True
        assert data["rental"]["returnDate"] is not None

    def test_return_rental_not_found(self, client):
        response = client.put("/rentals/does-not-exist/return")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"message": "Rental not found"}

    def test_return_already_returned_rental(self, client, db_session, active_rental):
        """
        Returning twice succeeds again and moves returnDate forward.

        This mirrors the service's long-standing behavior; the record stays
        returned.
        """
        client.put(f"/rentals/{active_rental.id}/return")

        # Push the first return into the past so the second one is later
        earlier = datetime(2020, 1, 1, 12, 0, 0)
        active_rental.return_date = earlier
        db_session.commit()

        response = client.put(f"/rentals/{active_rental.id}/return")

        assert response.status_code == status.HTTP_200_OK
        rental = response.json()["rental"]
        assert rental["returned"] is True
        second = datetime.fromisoformat(rental["returnDate"]).replace(tzinfo=None)
        assert second > earlier

    def test_full_example_flow(self, client):
        """Create Dune, rent it, fail to rent it again, return it."""
        book = client.post(
            "/books",
            data={"title": "Dune", "author": "Herbert", "genre": "SciFi"},
        )
        assert book.status_code == status.HTTP_201_CREATED
        book_id = book.json()["id"]

        rental = client.post("/rentals", json={"userId": "u1", "bookId": book_id})
        assert rental.status_code == status.HTTP_201_CREATED
        assert rental.json()["returned"] is False

        duplicate = client.post("/rentals", json={"userId": "u1", "bookId": book_id})
        assert duplicate.status_code == status.HTTP_400_BAD_REQUEST

        returned = client.put(f"/rentals/{rental.json()['id']}/return")
        assert returned.status_code == status.HTTP_200_OK


class TestRentalService:
    """Service-level tests without the HTTP layer."""

    def test_find_active_ignores_returned(self, db_session):
        db_session.add(Rental(user_id="u1", book_id="b1", returned=True))
        db_session.commit()

        service = RentalService(db_session)

        assert service.find_active("u1", "b1") is None

    def test_return_sets_date(self, db_session, active_rental):
        service = RentalService(db_session)
        before = datetime.now() - timedelta(days=1)

        rental = service.return_rental(active_rental.id)

        assert rental.returned is True
        assert rental.return_date is not None
        assert rental.return_date.replace(tzinfo=None) > before

    def test_rentals_are_not_linked_to_books(self, client, db_session, active_rental):
        """Deleting a book leaves its rentals in place."""
        client.delete(f"/books/{active_rental.book_id}")

        db_session.expire_all()
        assert db_session.get(Rental, active_rental.id) is not None
