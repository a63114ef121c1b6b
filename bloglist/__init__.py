"""Blog List.

A small blog-post management backend.

Core subpackages
----------------

- ``bloglist.core``:

  - Logging configuration.
  - SQLModel entities and async repositories for users and blogs.
  - Pydantic I/O schemas shared by the API.
  - Pure aggregation helpers over lists of blogs (``blog_stats``).

- ``bloglist.server``:

  - The FastAPI application with blog, user and login routers.
  - Password hashing and JWT issuing/verification.
  - Request authorization: a bearer token identifies the current user, and
    only the creator of a blog may edit or delete it.
"""

__version__ = "1.0.0"
