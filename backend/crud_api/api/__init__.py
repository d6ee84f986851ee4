"""API Layer — FastAPI routes and error handlers.

Invariants:
    - Routes registered explicitly by the app factories in main.py
    - All endpoints except GET / return structured JSON responses

Design Decisions:
    - Thin routes delegate to core (users) and services (todos)
"""
