"""Infrastructure Layer — clock implementations and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from core/ domain logic beyond its protocols
    - No logging configuration happens on import; applications call setup_logging

Design Decisions:
    - Concrete Clock implementations live here so the core stays free of "now"
"""
