from .mapper import Mapper, MappingError
from .profiles import build_mapper

__all__ = ["Mapper", "MappingError", "build_mapper"]
