"""
Service layer abstraction.

Each service encapsulates business logic for a domain.  Services work
on a store object handed to them, so the in‑memory store used here
could be swapped for another backend without changing API handlers.
"""
