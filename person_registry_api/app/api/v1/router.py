"""
Top‑level router for version 1 of the API.

This router aggregates domain‑specific routers under a unified
router.  When new domains are introduced, include their routers here.
"""

from fastapi import APIRouter

from .endpoints import persons

router = APIRouter()

router.include_router(persons.router, prefix="/person", tags=["persons"])
