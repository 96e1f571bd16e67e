"""
Application Layer
=================

Application services and use cases.
This layer orchestrates domain entities and repositories.

Contains:
- DTOs: Pydantic transfer objects for the API boundary
- Mapping: Entity <-> DTO translation rules
- Use Cases: Business operations (update franchise, assign movies, etc.)
- Services: Application services that coordinate multiple use cases
"""
