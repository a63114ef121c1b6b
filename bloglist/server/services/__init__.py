"""Request-scoped services and FastAPI dependencies."""
