"""Core infrastructure: settings, logging, storage and error handling."""
