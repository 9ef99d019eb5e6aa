"""API Layer — FastAPI routes.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All endpoints return JSON bodies carrying the fixed CORS headers
"""
