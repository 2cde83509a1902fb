"""Pydantic Schemas — serialisation contracts for the calendar value types.

Invariants:
    - Schemas validate at the system boundary (payloads crossing JSON)
    - to_domain() always goes through the value-type constructors

Design Decisions:
    - Separate from core: schemas are wire contracts, core types are the domain
"""
