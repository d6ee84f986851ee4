"""Services Layer — stateful, async components owned by an app instance.

Invariants:
    - Each service object lives on app.state and is reached through a dependency
"""
