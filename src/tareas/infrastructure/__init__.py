"""Infrastructure layer: authentication, persistence and the HTTP API."""
