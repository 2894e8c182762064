"""Adapters – GraphQL backend, HTTP transport and FastAPI surface."""
