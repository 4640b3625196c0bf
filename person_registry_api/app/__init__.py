"""
Application package initializer.

This package contains the main entrypoint for the API and its
submodules: ``core`` (configuration, logging, storage and error
handling), ``schemas`` (payload validation), ``services`` (business
logic) and ``api`` (versioned HTTP routers).
"""

from .main import app  # noqa: F401
