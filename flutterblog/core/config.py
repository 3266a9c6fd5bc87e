import os
from dotenv import load_dotenv

# Загружаем переменные окружения
load_dotenv()

# Параметры PostgreSQL (необязательные, по умолчанию используется SQLite)
DB_USERNAME = os.getenv("DB_USERNAME")
DB_PASSWORD = os.getenv("DB_PASSWORD")
DB_NAME = os.getenv("DB_NAME", "flutter")
DB_PORT = os.getenv("DB_PORT", "5432")
DB_HOST = os.getenv("DB_HOST")

# Формируем строку подключения
if DB_HOST:
    DATABASE_URL = f"postgresql+psycopg2://{DB_USERNAME}:{DB_PASSWORD}@{DB_HOST}:{DB_PORT}/{DB_NAME}"
else:
    DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///flutter.db")

SQL_ECHO = os.getenv("SQL_ECHO", "false").lower() == "true"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Настройки HTTP-сервера
PORT = int(os.getenv("PORT", "8080"))
CORS_ORIGINS = [origin.strip() for origin in os.getenv("CORS_ORIGINS", "*").split(",") if origin.strip()]
STATIC_DIR = os.getenv("STATIC_DIR", "public")

# Сколько постов показывать во вкладке "Trending"
TRENDING_LIMIT = int(os.getenv("TRENDING_LIMIT", "5"))
