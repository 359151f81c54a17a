"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services
receive the store connection as their first argument so the API
layer decides which connection is used and tests can pass their own.
"""
