"""Services operating on the busbook registry."""
