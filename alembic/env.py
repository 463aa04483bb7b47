from logging.config import fileConfig
from sqlalchemy import create_engine, pool
from alembic import context
from catalog_api.core.config import settings
from catalog_api.db.session import Base

# Registers the catalog tables on Base.metadata
from catalog_api.models.product import Product  # noqa: F401
from catalog_api.models.variant import ProductVariant  # noqa: F401

config = context.config
if config.config_file_name is not None:
    fileConfig(config.config_file_name)
target_metadata = Base.metadata

def database_url() -> str:
    """An explicit ``sqlalchemy.url`` wins over SQLALCHEMY_DATABASE_URI."""
    return config.get_main_option("sqlalchemy.url") or settings.SQLALCHEMY_DATABASE_URI

def configure_options(url: str) -> dict:
    return {
        "target_metadata": target_metadata,
        "compare_type": True,
        # SQLite cannot ALTER most columns in place
        "render_as_batch": url.startswith("sqlite"),
    }

def run_migrations_offline() -> None:
    url = database_url()
    context.configure(
        url=url,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        **configure_options(url),
    )

    with context.begin_transaction():
        context.run_migrations()

def run_migrations_online() -> None:
    url = database_url()
    connectable = create_engine(url, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(connection=connection, **configure_options(url))

        with context.begin_transaction():
            context.run_migrations()

    connectable.dispose()

if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
