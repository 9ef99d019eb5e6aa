"""Route Modules — one file per resource.

Invariants:
    - Each module exposes its handlers; main.py registers them
    - Routes never talk to the store directly (delegate to services)
"""
