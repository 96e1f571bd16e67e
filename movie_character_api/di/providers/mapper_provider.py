from typing import TYPE_CHECKING

from ...application.mapping.mapper import Mapper
from ...application.mapping.profiles import build_mapper

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class MapperProvider:
    """Mapper provider - registers the process-wide entity/DTO mapper"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_singleton(Mapper, build_mapper())
