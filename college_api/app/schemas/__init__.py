"""
Pydantic schema definitions for API payloads.

Schemas are separated from storage to decouple the API representation
from persistence.
"""
