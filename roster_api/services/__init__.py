"""
High-level use cases for the roster API.

Routers call these services instead of talking to the repository directly.
"""
