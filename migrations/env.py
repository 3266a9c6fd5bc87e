from alembic import context
from sqlalchemy import create_engine, pool
from logging.config import fileConfig
from flutterblog.core.db import Base  # Подключаем метаданные моделей
from flutterblog.models.post import Post  # Импортируем все модели
from flutterblog.core.config import DATABASE_URL

# Настраиваем Alembic
config = context.config
fileConfig(config.config_file_name)

# Указываем метаданные моделей
target_metadata = Base.metadata

# Устанавливаем URL БД
config.set_main_option("sqlalchemy.url", DATABASE_URL)


def run_migrations_offline():
    """Генерируем SQL без подключения к БД (alembic upgrade --sql)"""
    context.configure(
        url=DATABASE_URL,
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={"paramstyle": "named"},
        compare_type=True,
    )

    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    """Запускаем миграции в онлайн-режиме"""
    connectable = create_engine(DATABASE_URL, poolclass=pool.NullPool)

    with connectable.connect() as connection:
        context.configure(
            connection=connection,
            target_metadata=target_metadata,
            compare_type=True,
            render_as_batch=connection.dialect.name == "sqlite",
        )

        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
