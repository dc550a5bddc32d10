"""SQLAlchemy engine/session initialization."""
from __future__ import annotations

from flask import Flask
from loguru import logger
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool


class Database:
    def __init__(self) -> None:
        self.engine = None
        self.session_factory = None  # type: ignore[assignment]

    def init_app(self, app: Flask) -> None:
        url: str = app.config["DATABASE_URL"]
        echo: bool = app.config.get("SQL_ECHO", False)

        if url.startswith("sqlite"):
            # one shared connection so in-memory databases survive across sessions
            self.engine = create_engine(
                url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        else:
            self.engine = create_engine(
                url,
                echo=echo,
                pool_pre_ping=True,
                pool_size=app.config.get("POOL_SIZE", 10),
                max_overflow=app.config.get("MAX_OVERFLOW", 20),
            )
        # one short-lived session per repository query; never shared across threads
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False, autoflush=False)
        logger.info("database engine ready: {}", self.engine.url.render_as_string(hide_password=True))

    def teardown(self) -> None:
        if self.engine is not None:
            self.engine.dispose()


db = Database()
