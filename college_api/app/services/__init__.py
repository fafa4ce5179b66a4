"""
Service layer abstraction.

Each service encapsulates business logic for a domain and works against
a repository, so API handlers do not depend on how records are stored.
"""
