"""Version 1 of the blog list HTTP API."""
