"""
Web applications for the dictionary service.

This package contains the HTTP surface:
- Dictionary JSON API (word lookup, random user agent, health check)
"""

from .dictionary_api import create_app

__all__ = ['create_app']
