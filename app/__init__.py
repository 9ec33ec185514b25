"""Face match service."""
