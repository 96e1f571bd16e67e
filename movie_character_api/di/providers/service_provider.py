from typing import TYPE_CHECKING

from ...application.services.character_service import CharacterService
from ...application.services.franchise_service import FranchiseService
from ...application.services.movie_service import MovieService
from ...domain.repositories.character_repository import CharacterRepository
from ...domain.repositories.franchise_repository import FranchiseRepository
from ...domain.repositories.movie_repository import MovieRepository

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

    from ..base_container import BaseContainer


class ServiceProvider:
    """Service provider - registers franchise, movie and character services"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register service factories.
        Every service gets repositories sharing the request's session.
        """

        def franchise_service(session: "Session") -> FranchiseService:
            return FranchiseService(
                franchise_repository=container.get(FranchiseRepository, session=session),
                movie_repository=container.get(MovieRepository, session=session),
            )

        def movie_service(session: "Session") -> MovieService:
            return MovieService(
                movie_repository=container.get(MovieRepository, session=session),
                character_repository=container.get(CharacterRepository, session=session),
            )

        def character_service(session: "Session") -> CharacterService:
            return CharacterService(
                character_repository=container.get(CharacterRepository, session=session),
            )

        container.register_factory(FranchiseService, franchise_service)
        container.register_factory(MovieService, movie_service)
        container.register_factory(CharacterService, character_service)
