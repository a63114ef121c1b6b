"""Unit tests for the database layer in bloglist/core/database.

- Entity model validation tests (SQLModel)
- Repository tests against a mocked session and in-memory SQLite
"""
