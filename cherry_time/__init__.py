"""Cherry Time — immutable week, month and period value types with ISO-8601 arithmetic.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)

Design Decisions:
    - Empty __init__.py: explicit imports only, e.g. `from cherry_time.core.period import Period`
"""
