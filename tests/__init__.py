"""Test suite for the credential lifecycle service.

Test structure follows the test pyramid:
- unit/: Handlers and services with mocked ports
- integration/: Repositories, bcrypt, JWT and handlers on SQLite
- api/: HTTP endpoints with stubbed handlers
- smoke/: Full lifecycle over HTTP against a real database
"""
