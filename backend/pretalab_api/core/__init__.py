"""Core Layer — identifiers, result variants, messages and error types. No IO.

Invariants:
    - No module in core/ imports from api/, infrastructure/, models/ or db/
"""
