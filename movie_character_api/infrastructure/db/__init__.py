"""
Database Infrastructure
=======================

SQLAlchemy engine, sessions and repository implementations.
"""
