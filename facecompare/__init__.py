"""Face template comparison service."""
