"""Services Layer — task operation handlers.

Invariants:
    - Each handler issues exactly one store call
    - Handlers return response payloads, never HTTP responses
"""
