"""Infrastructure: HTTP transport, logging and metrics."""
