"""Database Infrastructure: SQLAlchemy declarative Base and shared column mixins.

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite in tests
"""
