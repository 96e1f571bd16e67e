from .base_repository import Repository
from .franchise_repository import FranchiseRepository
from .movie_repository import MovieRepository
from .character_repository import CharacterRepository

__all__ = ["Repository", "FranchiseRepository", "MovieRepository", "CharacterRepository"]
