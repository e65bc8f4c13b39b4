"""Application commands package."""
