"""Presentation package."""
