"""
Конфигурация конвертера и API
"""

from dataclasses import dataclass, field
from typing import List, Optional

from pegon import __version__


@dataclass
class EngineConfig:
    """Конфигурация движка"""

    # Вариант орфографии: "pegon" или "jawi"
    variant: str = "pegon"

    # Харакат по умолчанию (если вызывающий не указал явно)
    harakah: bool = False

    # Словарь: None - словарь из пакета, иначе путь или URL
    lexicon_source: Optional[str] = None
    use_lexicon: bool = True

    # Схлопывать пробелы и табы в один пробел
    collapse_whitespace: bool = True


@dataclass
class ApiConfig:
    """Конфигурация REST API"""

    title: str = "Pegon Translit API"
    description: str = "API для транслитерации латиницы в пегон и обратно"
    version: str = __version__

    host: str = "0.0.0.0"
    port: int = 8000

    cors_origins: List[str] = field(default_factory=lambda: ["*"])

    # Максимум текстов в одном пакетном запросе
    max_batch_size: int = 100


@dataclass
class FullConfig:
    """Полная конфигурация"""

    engine: EngineConfig = field(default_factory=EngineConfig)
    api: ApiConfig = field(default_factory=ApiConfig)

    project_name: str = "pegon-translit"


# Предустановленные конфигурации

def get_default_config() -> FullConfig:
    """Пегон без хараката, словарь из пакета"""
    return FullConfig()


def get_harakah_config() -> FullConfig:
    """Пегон с харакатом по умолчанию"""
    config = FullConfig()
    config.engine.harakah = True
    return config


def get_jawi_config() -> FullConfig:
    """Малайский джави (ڬ вместо ݢ)"""
    config = FullConfig()
    config.engine.variant = "jawi"
    return config


def get_config(preset: str = "default") -> FullConfig:
    """
    Получение конфигурации по имени пресета.

    Args:
        preset: "default", "harakah", "jawi"

    Returns:
        FullConfig
    """
    presets = {
        "default": get_default_config,
        "harakah": get_harakah_config,
        "jawi": get_jawi_config,
    }

    if preset not in presets:
        raise ValueError(f"Unknown preset: {preset}. Available: {list(presets.keys())}")

    return presets[preset]()


if __name__ == "__main__":
    config = get_default_config()

    print("Pegon Translit Configuration")
    print("=" * 50)
    print(f"\nVariant: {config.engine.variant}")
    print(f"Harakah: {config.engine.harakah}")
    print(f"Lexicon: {config.engine.lexicon_source or '(bundled)'}")
    print(f"\nAPI: {config.api.host}:{config.api.port}")
    print(f"Max batch size: {config.api.max_batch_size}")
