"""RESTful Tasks — REST verbs mapped onto CRUD calls against a store's tasks table.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, no star exports
"""
