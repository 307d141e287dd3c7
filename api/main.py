"""
REST API для транслитерации латиницы в пегон

Запуск:
    uvicorn api.main:app --host 0.0.0.0 --port 8000

Документация API:
    http://localhost:8000/docs

Переменные окружения:
    PEGON_PRESET   - пресет конфигурации (default, harakah, jawi)
    PEGON_LEXICON  - путь или URL словаря вместо встроенного
"""

import logging
import os
from contextlib import asynccontextmanager
from typing import List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from pegon import __version__
from pegon.config import FullConfig, get_config
from pegon.converter import ConversionError, Direction, PegonConverter, detect_direction


logger = logging.getLogger(__name__)

PLACEHOLDER_MESSAGE = "Silakan masukkan teks untuk diterjemahkan."
ERROR_MESSAGE = "Terjadi kesalahan dalam penerjemahan. Silakan coba lagi."

# Примеры фраз для /examples
COMMON_PHRASES = [
    "Saya sedang belajar",
    "Apa kabar?",
    "Terima kasih",
    "Selamat pagi",
    "Bagaimana kabarmu?",
]


def load_config() -> FullConfig:
    """Конфигурация из переменных окружения"""
    config = get_config(os.environ.get("PEGON_PRESET", "default"))
    lexicon = os.environ.get("PEGON_LEXICON")
    if lexicon:
        config.engine.lexicon_source = lexicon
    return config


config = load_config()

# Глобальная переменная для конвертера
converter: Optional[PegonConverter] = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Загрузка конвертера и словаря при старте"""
    global converter

    try:
        converter = PegonConverter.from_config(config.engine)
        logger.info("Конвертер готов: %d слов в словаре", len(converter.lexicon))
    except ValueError as e:
        logger.error("Ошибка конфигурации конвертера: %s", e)
        logger.error("API запустится без конвертера")

    yield

    converter = None


app = FastAPI(
    title=config.api.title,
    description=config.api.description,
    version=__version__,
    lifespan=lifespan,
)

# CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.api.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Модели данных

class ConvertRequest(BaseModel):
    """Запрос на конвертацию"""
    text: Optional[str] = Field(
        "",
        description="Исходный текст (латиница или пегон)",
        examples=["apa kabar?"],
    )
    direction: Optional[Direction] = Field(
        None,
        description="Направление; если не указано, определяется по тексту",
    )
    harakah: Optional[bool] = Field(
        None,
        description="Расставлять харакат (по умолчанию из конфигурации)",
    )

    class Config:
        json_schema_extra = {
            "example": {
                "text": "terima kasih",
                "direction": "latin-to-pegon",
                "harakah": False,
            }
        }


class TextRequest(BaseModel):
    """Запрос с фиксированным направлением"""
    text: Optional[str] = Field("", description="Исходный текст")
    harakah: Optional[bool] = None


class ConvertResponse(BaseModel):
    """Результат конвертации"""
    result: str = Field(..., description="Сконвертированный текст")
    direction: Direction
    harakah: bool
    message: Optional[str] = Field(None, description="Сообщение для пустого ввода")


class BatchRequest(BaseModel):
    """Пакетный запрос"""
    texts: List[str] = Field(
        ...,
        min_length=1,
        max_length=config.api.max_batch_size,
        description=f"Список текстов (1-{config.api.max_batch_size})",
    )
    direction: Optional[Direction] = None
    harakah: Optional[bool] = None


class BatchResponse(BaseModel):
    """Пакетный ответ"""
    results: List[str]
    count: int


class HealthResponse(BaseModel):
    """Статус здоровья"""
    status: str
    converter_loaded: bool
    lexicon_size: int
    version: str = __version__


def get_converter() -> PegonConverter:
    if converter is None:
        raise HTTPException(
            status_code=503,
            detail="Конвертер не загружен. Перезапустите сервер.",
        )
    return converter


def run_conversion(
    text: Optional[str],
    direction: Optional[Direction],
    harakah: Optional[bool],
) -> ConvertResponse:
    engine = get_converter()
    direction = direction or detect_direction(text)
    harakah = engine.harakah if harakah is None else harakah

    if not text or not text.strip():
        return ConvertResponse(
            result="",
            direction=direction,
            harakah=harakah,
            message=PLACEHOLDER_MESSAGE,
        )

    try:
        result = engine.convert(text, direction, harakah)
    except ConversionError:
        raise HTTPException(status_code=500, detail=ERROR_MESSAGE)

    return ConvertResponse(result=result, direction=direction, harakah=harakah)


# Эндпоинты

@app.get("/", tags=["Info"])
async def root():
    """Информация об API"""
    return {
        "name": config.api.title,
        "description": config.api.description,
        "version": __version__,
        "variant": config.engine.variant,
        "docs": "/docs",
    }


@app.get("/health", response_model=HealthResponse, tags=["Info"])
async def health_check():
    """Проверка здоровья сервиса"""
    return HealthResponse(
        status="healthy",
        converter_loaded=converter is not None,
        lexicon_size=len(converter.lexicon) if converter is not None else 0,
    )


@app.post("/convert", response_model=ConvertResponse, tags=["Conversion"])
async def convert_text(request: ConvertRequest):
    """
    Конвертация текста.

    **Направления:**
    - `latin-to-pegon` - латиница → пегон
    - `pegon-to-latin` - пегон → латиница (с потерями)

    Если направление не указано, оно определяется по наличию арабских букв.
    """
    return run_conversion(request.text, request.direction, request.harakah)


@app.post("/convert/batch", response_model=BatchResponse, tags=["Conversion"])
async def convert_batch(request: BatchRequest):
    """
    Пакетная конвертация.

    Все тексты конвертируются с одними настройками; при ошибке
    в любом из них запрос завершается ошибкой целиком.
    """
    engine = get_converter()

    results = []
    for text in request.texts:
        direction = request.direction or detect_direction(text)
        try:
            results.append(engine.convert(text, direction, request.harakah))
        except ConversionError:
            raise HTTPException(status_code=500, detail=ERROR_MESSAGE)

    return BatchResponse(results=results, count=len(results))


@app.post("/convert/pegon", response_model=ConvertResponse, tags=["Quick"])
async def convert_to_pegon(request: TextRequest):
    """Латиница → пегон"""
    return run_conversion(request.text, Direction.LATIN_TO_PEGON, request.harakah)


@app.post("/convert/latin", response_model=ConvertResponse, tags=["Quick"])
async def convert_to_latin(request: TextRequest):
    """Пегон → латиница"""
    return run_conversion(request.text, Direction.PEGON_TO_LATIN, False)


@app.get("/examples", tags=["Info"])
async def list_examples():
    """Примеры фраз с конвертацией"""
    engine = get_converter()
    return {
        "examples": [
            {"latin": phrase, "pegon": engine.to_pegon(phrase, harakah=False)}
            for phrase in COMMON_PHRASES
        ]
    }


@app.get("/lexicon/{word}", tags=["Info"])
async def lookup_word(word: str):
    """Поиск слова в словаре"""
    engine = get_converter()
    spelling = engine.lexicon.lookup_word(word)
    if spelling is None:
        raise HTTPException(status_code=404, detail=f"Слово '{word}' не найдено в словаре")
    return {"word": word.lower(), "pegon": spelling}


if __name__ == "__main__":
    import uvicorn

    from pegon.logging_config import setup_logging

    setup_logging()
    uvicorn.run(app, host=config.api.host, port=config.api.port)
