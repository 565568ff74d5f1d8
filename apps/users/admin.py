"""
Expose admin registrations for Django's autodiscovery.
"""
from .interfaces import admin  # noqa: F401
