"""API module - HTTP endpoints.

This module contains API routers organized by version (v1, v2, etc.)
and the request-handler guards shared by every version.
"""
