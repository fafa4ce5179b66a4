"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``schemas`` (pydantic payloads), ``repositories`` (lecturer
storage), ``services`` (business rules), ``api`` (versioned REST
routers) and ``graphql_api`` (the GraphQL schema).
"""

from .main import app  # noqa: F401
