"""
Core utilities shared across the roster API: configuration and logging setup.
"""
