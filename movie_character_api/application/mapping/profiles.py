"""
Mapping Profiles
================

Entity <-> DTO correspondences for franchises, movies and characters.
"""
from movie_character_api.application.dto.character_dto import (
    CharacterCreateDTO,
    CharacterEditDTO,
    CharacterReadDTO,
)
from movie_character_api.application.dto.franchise_dto import (
    FranchiseCreateDTO,
    FranchiseEditDTO,
    FranchiseReadDTO,
)
from movie_character_api.application.dto.movie_dto import (
    MovieCreateDTO,
    MovieEditDTO,
    MovieReadDTO,
)
from movie_character_api.application.mapping.mapper import Mapper
from movie_character_api.domain.models.character import Character
from movie_character_api.domain.models.franchise import Franchise
from movie_character_api.domain.models.movie import Movie


class FranchiseProfile:
    """Franchise mappings. Read DTOs flatten movies into ids."""

    @staticmethod
    def configure(mapper: Mapper) -> None:
        mapper.create_map(
            Franchise,
            FranchiseReadDTO,
            members={"movies": lambda franchise: [movie.id for movie in franchise.movies]},
        )
        mapper.create_map(FranchiseCreateDTO, Franchise)
        mapper.create_map(FranchiseEditDTO, Franchise)


class MovieProfile:
    """Movie mappings. Read DTOs flatten franchise and characters into ids."""

    @staticmethod
    def configure(mapper: Mapper) -> None:
        mapper.create_map(
            Movie,
            MovieReadDTO,
            members={
                "franchise": lambda movie: movie.franchise_id,
                "characters": lambda movie: [character.id for character in movie.characters],
            },
        )
        mapper.create_map(MovieCreateDTO, Movie)
        mapper.create_map(MovieEditDTO, Movie)


class CharacterProfile:
    """Character mappings. Read DTOs flatten movies into ids."""

    @staticmethod
    def configure(mapper: Mapper) -> None:
        mapper.create_map(
            Character,
            CharacterReadDTO,
            members={"movies": lambda character: [movie.id for movie in character.movies]},
        )
        mapper.create_map(CharacterCreateDTO, Character)
        mapper.create_map(CharacterEditDTO, Character)


PROFILES = (FranchiseProfile, MovieProfile, CharacterProfile)


def build_mapper() -> Mapper:
    """Create a mapper with every profile applied."""
    mapper = Mapper()
    for profile in PROFILES:
        profile.configure(mapper)
    return mapper
