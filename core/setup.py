from typing import Any
from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import QueuePool, StaticPool
from config.setting import settings

Base = declarative_base()


class DatabaseSetup:
    def __init__(self, database_url: str = None) -> None:
        """Construct a Database Operator bound to a single engine"""
        self.database_url = database_url or settings.DATABASE_URL
        engine_kwargs = {"echo": settings.TESTING}

        if self.database_url.startswith("sqlite"):
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if ":memory:" in self.database_url or self.database_url == "sqlite://":
                # one shared connection, otherwise each session gets a fresh db
                engine_kwargs["poolclass"] = StaticPool
        else:
            engine_kwargs.update(
                {
                    "poolclass": QueuePool,
                    "pool_pre_ping": True,  # Verify connections before use
                    "pool_recycle": 3600,
                    "pool_size": 10,
                    "max_overflow": 20,
                }
            )

        self._engine = create_engine(self.database_url, **engine_kwargs)
        self._session_maker = sessionmaker(
            bind=self._engine, autocommit=False, autoflush=False, expire_on_commit=False
        )

    def get_session(self) -> sessionmaker:
        """Grant session

            This method returns the database
            session factory
        Returns:
            object: database session factory
        """
        return self._session_maker

    @property
    def get_engine(self) -> Any:
        """Grant engine
            This method returns the
            database engine

        Returns:
            object: database engine
        """
        return self._engine

    def create_tables(self) -> None:
        # models register themselves on Base when imported
        import model  # noqa: F401

        Base.metadata.create_all(bind=self.get_engine)

    def dispose(self) -> None:
        self.get_engine.dispose()
