"""Presentation controllers package."""
