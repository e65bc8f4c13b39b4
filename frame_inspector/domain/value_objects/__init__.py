"""Domain value objects package."""
