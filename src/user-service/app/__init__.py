"""User service: example FastAPI application with handler block logging."""
