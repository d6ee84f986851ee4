"""Pydantic Schemas — request/response validation for API endpoints.

Invariants:
    - Schemas validate shape at the system boundary
    - Domain rules (emptiness, zero ids) live in core/, not here
"""
