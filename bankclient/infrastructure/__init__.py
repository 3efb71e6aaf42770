"""Infrastructure layer: HTTP adapter for the banking API and logging."""
