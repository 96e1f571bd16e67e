"""
Domain Layer
============

Core business entities and the contracts for accessing them.

Contains:
- Models: SQLAlchemy entities (Franchise, Movie, Character)
- Repository Interfaces: Abstract contracts for data access
- Exceptions: Failures raised by services and converted at the API boundary
"""
