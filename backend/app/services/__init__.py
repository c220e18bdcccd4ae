"""Services Layer — persistence workflows that wrap pure core logic.

Invariants:
    - Services take an AsyncSession argument; they never create sessions
    - Each service commits its own unit of work exactly once

Design Decisions:
    - Functional core (core/) computes, services persist (ADR: functional core, imperative shell)
"""
