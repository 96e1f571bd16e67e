from typing import Optional, TYPE_CHECKING

from ...infrastructure.db.database import get_engine, get_sessionmaker

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database connection provider - single source of truth for all DB connections"""

    @staticmethod
    def register(container: "BaseContainer", database_url: Optional[str] = None) -> None:
        """
        Register the SQLAlchemy engine and session factory.
        This is the ONLY place where database connections are created.
        Change the URL here (or via DATABASE_URL) and every repository follows.
        """
        engine = get_engine(database_url)

        container.register_singleton("engine", engine)
        container.register_singleton("session_factory", get_sessionmaker(engine))
