"""Application use cases package."""
