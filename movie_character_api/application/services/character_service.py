"""
Character Service
=================

Application service for character-related operations.
"""
from typing import List, Optional

from movie_character_api.application.use_cases.common import (
    CreateEntityUseCase,
    DeleteEntityUseCase,
    UpdateEntityUseCase,
)
from movie_character_api.domain.models.character import Character
from movie_character_api.domain.repositories.character_repository import CharacterRepository


class CharacterService:
    """Application service for character operations."""

    def __init__(self, character_repository: CharacterRepository):
        self._repository = character_repository
        self._create_use_case = CreateEntityUseCase(character_repository, "Character")
        self._update_use_case = UpdateEntityUseCase(character_repository, "Character")
        self._delete_use_case = DeleteEntityUseCase(character_repository, "Character")

    def list_characters(self) -> List[Character]:
        return self._repository.find_all()

    def get_character(self, character_id: int) -> Optional[Character]:
        return self._repository.find_by_id(character_id)

    def create_character(self, character: Character) -> Character:
        return self._create_use_case.execute(character)

    def update_character(self, character_id: int, character: Character) -> None:
        self._update_use_case.execute(character_id, character)

    def delete_character(self, character_id: int) -> bool:
        return self._delete_use_case.execute(character_id)
