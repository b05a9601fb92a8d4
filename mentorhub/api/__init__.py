"""HTTP API layer: routers, dependencies, error handling and the app factory."""
