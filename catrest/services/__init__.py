"""
High-level use cases for the catrest API.

Routers call these services instead of touching repositories directly; the
services raise errors from catrest.core.errors and never build responses.
"""
