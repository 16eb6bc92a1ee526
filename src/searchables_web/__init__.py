"""JSON web API for searchables (Flask)."""
from .web import app, main

__all__ = ["app", "main"]
