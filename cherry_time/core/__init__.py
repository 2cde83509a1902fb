"""Core Layer — pure calendar arithmetic, no IO, no clock reads, no settings.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/ or config
    - All functions are pure and deterministic; "now" arrives through a Clock

Design Decisions:
    - Functional core separated from imperative shell
"""
