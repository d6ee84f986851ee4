"""crud-api — mock users service and in-memory todos service.

Invariants:
    - Package root holds only the version (import side-effects prohibited)
"""

__version__ = "0.1.0"
