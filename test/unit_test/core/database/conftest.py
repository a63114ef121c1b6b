"""Sample data for database unit tests."""

from __future__ import annotations

import pytest


@pytest.fixture(scope="function")
def sample_blog_data() -> dict:
    return {
        "title": "React patterns",
        "author": "Michael Chan",
        "url": "https://reactpatterns.com/",
        "likes": 7,
        "user_id": 1,
    }


@pytest.fixture(scope="function")
def sample_user_data() -> dict:
    return {
        "username": "mluukkai",
        "name": "Matti Luukkainen",
        "password_hash": "$2b$04$notarealhashbutlongenoughforthetests.................",
    }
