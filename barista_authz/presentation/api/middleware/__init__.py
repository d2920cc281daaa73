"""Request-handler guards (FastAPI dependencies)."""
