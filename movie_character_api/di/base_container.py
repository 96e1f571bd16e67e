# Standard library imports
from typing import Any, Callable, Dict, Type, TypeVar, Union

TypeVarType = TypeVar('TypeVarType')


class BaseContainer:
    """Base dependency injection container with core functionality"""

    def __init__(self) -> None:
        self.instances: Dict[Union[Type, str], Any] = {}
        self.factories: Dict[Type, Callable[..., Any]] = {}

    def register_singleton(self, interface: Union[Type[TypeVarType], str], instance: TypeVarType) -> None:
        """Register a singleton instance (supports both types and string keys)"""
        self.instances[interface] = instance

    def register_factory(self, interface: Type[TypeVarType], factory: Callable[..., TypeVarType]) -> None:
        """Register a factory function. Keyword arguments given to get() are passed through."""
        self.factories[interface] = factory

    def get(self, interface: Union[Type[TypeVarType], str], **kwargs: Any) -> TypeVarType:
        """
        Get an instance of the requested type or string key.

        Singletons win over factories. Factories build a fresh instance on
        every call, e.g. request-scoped repositories bound to a session:

            container.get(FranchiseRepository, session=db)
        """
        if interface in self.instances:
            return self.instances[interface]

        if interface in self.factories:
            return self.factories[interface](**kwargs)

        raise ValueError(f"No registration found for {interface}")
