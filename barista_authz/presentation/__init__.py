"""Presentation layer - HTTP surface of the authorization engine."""
