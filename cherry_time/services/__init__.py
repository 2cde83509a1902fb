"""Services Layer — imperative shell around the calendar core.

Invariants:
    - Services read the clock and settings, then delegate to pure core functions
    - Core errors propagate unchanged; services only log them

Design Decisions:
    - One service object per concern, dependencies injected through __init__
"""
