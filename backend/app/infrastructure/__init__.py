"""Infrastructure Layer — database sessions, persistent stores, and logging setup.

Invariants:
    - Infrastructure may import core/ types and errors, never api/ or services/
    - All SQLAlchemy failures mapped to core.errors.DatabaseError

Design Decisions:
    - Stores take an AsyncSession in their constructor: injectable, no ambient state
"""
