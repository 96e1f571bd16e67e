"""
API v1 Package
===============

Version 1 API controllers.
"""
from .franchise_controller import router as franchise_router
from .movie_controller import router as movie_router
from .character_controller import router as character_router

__all__ = ["franchise_router", "movie_router", "character_router"]
