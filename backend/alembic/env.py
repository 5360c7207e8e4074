from logging.config import fileConfig
import logging

from alembic import context
from app.db import Base, engine  # use the API's engine and Base
from app.models import bike, event, idea, school, workout  # noqa: F401  (register tables)

# Alembic Config object (reads alembic.ini etc.)
config = context.config

# Set up logging from alembic.ini
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

logger = logging.getLogger("alembic.env")

target_metadata = Base.metadata


def run_migrations_online() -> None:
    """Run migrations in 'online' mode using the app's Engine."""
    # Batch mode for SQLite (dev), not needed for Postgres
    render_as_batch = engine.url.get_backend_name().startswith("sqlite")

    with engine.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=render_as_batch,
        )

        with context.begin_transaction():
            context.run_migrations()


# Online only: the engine comes from app settings
run_migrations_online()
