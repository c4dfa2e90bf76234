"""Member registry: in-memory member store and the service enforcing unique names."""
