from .franchise_dto import FranchiseCreateDTO, FranchiseEditDTO, FranchiseReadDTO
from .movie_dto import MovieCreateDTO, MovieEditDTO, MovieReadDTO
from .character_dto import CharacterCreateDTO, CharacterEditDTO, CharacterReadDTO

__all__ = [
    "FranchiseCreateDTO",
    "FranchiseEditDTO",
    "FranchiseReadDTO",
    "MovieCreateDTO",
    "MovieEditDTO",
    "MovieReadDTO",
    "CharacterCreateDTO",
    "CharacterEditDTO",
    "CharacterReadDTO",
]
