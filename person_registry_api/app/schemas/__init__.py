"""
Pydantic schema definitions for API payloads.

Schemas describe the shape a request body must have.  Records are
stored as the plain JSON objects the clients sent, so the schemas are
used for validation only.
"""
