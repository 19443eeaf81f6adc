"""Browser-facing server: page, REST endpoints, and play WebSocket."""
