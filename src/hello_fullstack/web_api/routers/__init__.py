"""
API Routers
===========
Each router handles a specific domain of the API.
"""
from . import greeting

__all__ = ["greeting"]
