"""Infrastructure layer: logging, variant registry and dependency injection."""
