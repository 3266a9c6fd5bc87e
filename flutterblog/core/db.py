from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from flutterblog.core.config import DATABASE_URL, SQL_ECHO

# SQLite по умолчанию не разрешает использовать соединение из другого потока
connect_args = {"check_same_thread": False} if DATABASE_URL.startswith("sqlite") else {}

# Создаём подключение к БД
engine = create_engine(DATABASE_URL, echo=SQL_ECHO, connect_args=connect_args)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Базовый класс для моделей
Base = declarative_base()

# Функция для получения сессии БД (используется в Depends)
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
