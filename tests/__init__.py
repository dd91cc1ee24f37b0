"""
Test Suite for Book Rental API

Test Organization:
- conftest.py: Shared fixtures (test database, client, sample data)
- test_auth.py: /register and /login
- test_books.py: /books endpoints
- test_rentals.py: /rentals endpoints and the rental lifecycle
- test_security.py, test_storage.py, test_config.py, test_database.py,
  test_errors.py: supporting modules

Running Tests:
    pytest
    pytest tests/test_rentals.py -v
"""
