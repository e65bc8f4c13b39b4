"""Presentation routers package."""
