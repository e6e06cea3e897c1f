"""Core Layer — ordered storage, key encoding, rendering. No IO, no async, no locks.

Invariants:
    - No module in core/ imports from services/, api/, or infrastructure/
    - Every function is deterministic given its inputs (clock is injected by services/)

Design Decisions:
    - Functional core separated from imperative shell: BlogService owns the
      mutable state and the lock, core only defines how it is stored and read
"""
