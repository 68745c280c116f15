"""Service Layer — orchestrates validation and store calls for each operation.

Invariants:
    - Services depend on repository Protocols, never on SQLAlchemy directly
"""
