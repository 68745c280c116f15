"""Core Layer — pure domain definitions, no IO, no DB.

Invariants:
    - No module in core/ imports from services/, api/, infrastructure/, or db/

Design Decisions:
    - Store access described by Protocols here, implemented in infrastructure/
"""
