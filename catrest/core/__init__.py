"""
Core utilities shared across the catrest service.

This package hosts configuration, logging setup and the error taxonomy.
Routers, services and repositories depend on these primitives instead of
reading the environment or inventing their own exceptions.
"""
