"""Barista Café authorization engine.

Role / permission / module catalogs, the authorization matrices that bind
them, the pure evaluation functions and the guards built on top of them.
"""

__version__ = "0.1.0"
