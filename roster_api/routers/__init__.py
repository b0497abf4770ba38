"""
FastAPI routers grouped by concern (health, schools).
"""
