"""Application layer - use cases built on the authorization engine."""
