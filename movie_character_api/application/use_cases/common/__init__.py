"""Entity-agnostic CRUD use cases."""
from .create_entity import CreateEntityUseCase
from .update_entity import UpdateEntityUseCase
from .delete_entity import DeleteEntityUseCase

__all__ = ["CreateEntityUseCase", "UpdateEntityUseCase", "DeleteEntityUseCase"]
