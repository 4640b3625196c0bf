"""
Version 1 of the API.

Routes of this version are mounted at the application root, so
clients call ``/person`` rather than ``/api/v1/person``.
"""
