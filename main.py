import logging
import os
from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy.exc import SQLAlchemyError
from flutterblog.api.avatars import router as avatars_router
from flutterblog.api.posts import router as posts_router
from flutterblog.core.config import CORS_ORIGINS, LOG_LEVEL, PORT, STATIC_DIR
from flutterblog.core.db import Base, engine
from flutterblog.core.errors import FlutterError, InternalError
import flutterblog.core.events  # Импортируем, чтобы обработчики событий зарегистрировались

logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Для свежей SQLite-базы создаём таблицы без Alembic
    Base.metadata.create_all(bind=engine)
    yield


app = FastAPI(title="Flutter", lifespan=lifespan)

# Добавляем CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(FlutterError)
async def flutter_error_handler(request: Request, exc: FlutterError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    logger.exception(f"Database error on {request.method} {request.url.path}")
    error = InternalError()
    return PlainTextResponse(error.message, status_code=error.status_code)


# ServerErrorMiddleware после ответа пробрасывает исключение дальше, трейсбек логирует uvicorn
@app.exception_handler(Exception)
async def unexpected_error_handler(request: Request, exc: Exception):
    error = InternalError()
    return PlainTextResponse(error.message, status_code=error.status_code)


# Подключаем API-маршруты
app.include_router(posts_router, prefix="/flutter", tags=["Posts"])
app.include_router(avatars_router, prefix="/flutter", tags=["Avatars"])

# Фронтенд и картинки аватаров (/img/<avatar>.png), если папка есть
if os.path.isdir(STATIC_DIR):
    app.mount("/", StaticFiles(directory=STATIC_DIR, html=True), name="static")

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="0.0.0.0", port=PORT, reload=True)
