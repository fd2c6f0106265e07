# Standard library imports
from logging.config import fileConfig
from pathlib import Path
import re

# Third-party imports
from alembic import context
from alembic.operations import ops
from sqlalchemy import Enum, engine_from_config, pool, text
from sqlalchemy.engine import make_url

# this is the Alembic Config object, which provides
# access to the values within the .ini file in use.
config = context.config

# Interpret the config file for Python logging.
# This line sets up loggers basically.
if config.config_file_name is not None:
    fileConfig(config.config_file_name)

# Local application imports
from bookclub.models import *  # noqa
from bookclub.models.base import Base
from bookclub.settings import settings

target_metadata = Base.metadata

# Async drivers used by the application and their sync counterparts for migrations
SYNC_DRIVERS = {
    "sqlite+aiosqlite": "sqlite",
    "postgresql+asyncpg": "postgresql+psycopg",
}


def get_url():
    if not settings.DATABASE_URL:
        return str(settings.SQLALCHEMY_DATABASE_URI)

    url = make_url(settings.DATABASE_URL)
    drivername = SYNC_DRIVERS.get(url.drivername, url.drivername)
    return url.set(drivername=drivername).render_as_string(hide_password=False)


def get_next_sequence_number():
    """
    Determine the next sequence number for migration files.

    Returns:
        str: The next sequence number formatted as 4 digits (e.g., "0002")
    """
    script_location = config.get_main_option("script_location")
    if not script_location:
        return "0001"

    versions_dir = Path(script_location) / "versions"
    if not versions_dir.exists():
        return "0001"

    # Look for pattern: NNNN_* at the start of filename
    sequence_numbers = []
    for filepath in versions_dir.glob("*.py"):
        if filepath.name.startswith("__"):
            continue
        match = re.match(r"^(\d{4})_", filepath.name)
        if match:
            sequence_numbers.append(int(match.group(1)))

    if sequence_numbers:
        return f"{max(sequence_numbers) + 1:04d}"

    existing_files = [f for f in versions_dir.glob("*.py") if not f.name.startswith("__")]
    return f"{len(existing_files) + 1:04d}"


def get_model_enum_definitions():
    """
    Extract enum definitions from SQLAlchemy models.

    Returns:
        dict: mapping of enum_type_name -> list of values
    """
    enum_definitions = {}

    for table in target_metadata.tables.values():
        for column in table.columns:
            if isinstance(column.type, Enum) and column.type.name:
                enum_definitions[column.type.name] = list(column.type.enums)

    return enum_definitions


def generate_enum_migration_ops(enum_definitions):
    """
    Generate ALTER TYPE operations for enum values added to the models since
    the enum type was created in PostgreSQL.

    New enum types are left to the CreateTableOp that first uses them.

    Returns:
        list: upgrade operations
    """
    bind = context.get_bind() if not context.is_offline_mode() else None
    if bind is None or bind.dialect.name != "postgresql":
        return []

    existing_enums: dict[str, list[str]] = {}
    result = bind.execute(
        text(
            """
        SELECT t.typname as enum_name, e.enumlabel as enum_value
        FROM pg_type t
        JOIN pg_enum e ON t.oid = e.enumtypid
        ORDER BY t.typname, e.enumsortorder
    """
        )
    )
    for enum_name, enum_value in result:
        existing_enums.setdefault(enum_name, []).append(enum_value)

    upgrade_ops = []
    for enum_name, values in enum_definitions.items():
        if enum_name not in existing_enums:
            continue

        new_values = set(values) - set(existing_enums[enum_name])
        if new_values:
            upgrade_ops.append(ops.ExecuteSQLOp(f"-- Add new enum values to {enum_name}"))
            for value in sorted(new_values):
                upgrade_ops.append(ops.ExecuteSQLOp(f"ALTER TYPE {enum_name} ADD VALUE IF NOT EXISTS '{value}'"))

    return upgrade_ops


def process_revision_directives(context, revision, directives):
    """
    Prefix revision ids with a sequence number and add enum value migrations.
    """
    if not directives:
        return

    sequence_num = get_next_sequence_number()
    enum_upgrade_ops = generate_enum_migration_ops(get_model_enum_definitions())

    for directive in directives:
        directive.rev_id = f"{sequence_num}_{directive.rev_id}"

        # Enum values must exist before any operation that uses them
        if enum_upgrade_ops and getattr(directive, "upgrade_ops", None) is not None:
            directive.upgrade_ops.ops = enum_upgrade_ops + directive.upgrade_ops.ops


def run_migrations_offline():
    """Run migrations in 'offline' mode.

    This configures the context with just a URL
    and not an Engine, though an Engine is acceptable
    here as well.  By skipping the Engine creation
    we don't even need a DBAPI to be available.

    Calls to context.execute() here emit the given string to the
    script output.

    """
    context.configure(
        url=get_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        compare_type=True,
        render_as_batch=True,
        process_revision_directives=process_revision_directives,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Run migrations in 'online' mode.

    In this scenario we need to create an Engine
    and associate a connection with the context.

    """
    configuration = config.get_section(config.config_ini_section) or {}
    configuration["sqlalchemy.url"] = get_url()
    connectable = engine_from_config(
        configuration,
        prefix="sqlalchemy.",
        poolclass=pool.NullPool,
    )

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=True,
            process_revision_directives=process_revision_directives,
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
