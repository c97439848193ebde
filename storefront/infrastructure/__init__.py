"""Infrastructure layer: configuration, logging and database access."""
