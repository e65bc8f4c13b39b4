"""Presentation views package."""
