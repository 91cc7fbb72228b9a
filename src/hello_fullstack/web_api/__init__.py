"""
Greeting Web API
================
FastAPI-based Responder that answers the root path with a fixed greeting.

Quick Start:
    python -m hello_fullstack.web_api.main
"""
from .main import app, create_app

__all__ = ["app", "create_app"]
