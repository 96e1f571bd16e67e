"""
Object Mapper
=============

Translates between domain entities and DTOs through declared mappings.

A mapping is registered once per (source, destination) pair. Destination
fields are filled from same-named source attributes unless a member
resolver is declared for them:

    mapper.create_map(
        Franchise,
        FranchiseReadDTO,
        members={"movies": lambda franchise: [m.id for m in franchise.movies]},
    )
"""
from typing import Any, Callable, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

from pydantic import BaseModel

DestinationType = TypeVar("DestinationType")
MemberResolver = Callable[[Any], Any]


class MappingError(LookupError):
    """No mapping is declared for the requested pair of types."""


class _TypeMap:
    """Declared correspondence between one source and one destination type."""

    def __init__(
        self,
        source: type,
        destination: type,
        members: Optional[Dict[str, MemberResolver]] = None,
        ignore: Iterable[str] = (),
    ):
        self.source = source
        self.destination = destination
        self.members = dict(members or {})
        self.ignore = set(ignore)

    def _destination_fields(self, obj: Any) -> List[str]:
        if issubclass(self.destination, BaseModel):
            return list(self.destination.model_fields)
        # Entity destinations take the fields the source DTO carries
        if isinstance(obj, BaseModel):
            return list(type(obj).model_fields)
        raise MappingError(
            f"Cannot infer fields for {self.source.__name__} -> {self.destination.__name__}"
        )

    def apply(self, obj: Any) -> Any:
        values: Dict[str, Any] = {}
        for name in self._destination_fields(obj):
            if name in self.ignore:
                continue
            if name in self.members:
                values[name] = self.members[name](obj)
            elif hasattr(obj, name):
                values[name] = getattr(obj, name)

        if issubclass(self.destination, BaseModel):
            return self.destination.model_validate(values)
        return self.destination(**values)


class Mapper:
    """
    Registry of type maps.

    Built once per process and injected wherever entities and DTOs are
    translated.
    """

    def __init__(self) -> None:
        self._maps: Dict[Tuple[type, type], _TypeMap] = {}

    def create_map(
        self,
        source: type,
        destination: type,
        members: Optional[Dict[str, MemberResolver]] = None,
        ignore: Iterable[str] = (),
    ) -> "Mapper":
        """
        Declare how to build ``destination`` objects from ``source`` objects.

        Args:
            source: Type being read
            destination: Type being built
            members: Resolvers for destination fields that have no
                same-named source attribute or need flattening
            ignore: Destination fields never populated

        Returns:
            The mapper itself, so declarations can be chained
        """
        self._maps[(source, destination)] = _TypeMap(source, destination, members, ignore)
        return self

    def has_map(self, source: type, destination: type) -> bool:
        """Check whether a mapping is declared for the pair."""
        return (source, destination) in self._maps

    def map(self, obj: Any, destination: Type[DestinationType]) -> DestinationType:
        """
        Map a single object.

        Raises:
            MappingError: If no mapping is declared for the pair
        """
        if not self.has_map(type(obj), destination):
            raise MappingError(
                f"No mapping declared for {type(obj).__name__} -> {destination.__name__}"
            )
        return self._maps[(type(obj), destination)].apply(obj)

    def map_list(self, objs: Iterable[Any], destination: Type[DestinationType]) -> List[DestinationType]:
        """Map every object of an iterable, preserving order and duplicates."""
        return [self.map(obj, destination) for obj in objs]
