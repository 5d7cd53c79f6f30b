"""Import graph reporting."""
