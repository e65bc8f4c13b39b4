"""Presentation DTOs package."""
