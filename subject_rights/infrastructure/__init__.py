"""Infrastructure layer: persistence, session stores, services."""
