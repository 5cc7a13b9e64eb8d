# src/nodepools/cli/__init__.py
"""
nodepools CLI Package

This package exposes the top-level Typer `app` used by the console entrypoint.
"""

from .main import app

__all__ = ["app"]
