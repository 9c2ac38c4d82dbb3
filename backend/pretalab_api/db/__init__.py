"""Database Infrastructure — SQLAlchemy Base for the document tables.

Invariants:
    - Single async engine per process, owned by DatabaseSessionManager
    - All sessions are async (AsyncSession)
"""
