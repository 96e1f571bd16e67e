"""
Domain Exceptions
=================

Failures raised by the application layer. Controllers convert them into
HTTP status codes; nothing below the API layer knows about HTTP.
"""


class DomainError(Exception):
    """Base class for all domain failures."""


class EntityNotFoundError(DomainError):
    """Requested entity does not exist."""

    def __init__(self, entity: str, entity_id: int):
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity} '{entity_id}' not found")


class IdMismatchError(DomainError):
    """Identifier in the request path differs from the one in the body."""

    def __init__(self, path_id: int, body_id: int):
        self.path_id = path_id
        self.body_id = body_id
        super().__init__(f"Path id '{path_id}' does not match body id '{body_id}'")


class InconsistentAssociationError(DomainError):
    """
    A related entity vanished while an association was being traversed.

    This is a data-integrity problem on the server side, but it is
    reported to the client as a bad request.
    """


class PersistenceError(DomainError):
    """Committing the unit of work failed."""
