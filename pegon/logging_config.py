"""
Настройка логирования

Использование:
    from pegon.logging_config import setup_logging
    setup_logging()
"""

import logging
import sys
from pathlib import Path
from typing import Optional


LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s:%(funcName)s:%(lineno)d | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_level: int = logging.INFO,
    log_file: Optional[str] = None,
    quiet_http: bool = True,
) -> logging.Logger:
    """
    Настройка корневого логгера.

    Args:
        log_level: Минимальный уровень для консоли
        log_file: Путь к файлу лога (необязательно)
        quiet_http: Приглушить подробные логи HTTP-библиотек

    Returns:
        Корневой логгер
    """
    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    root_logger = logging.getLogger()

    # Повторный вызов не должен дублировать обработчики
    for handler in list(root_logger.handlers):
        if getattr(handler, "_pegon", False):
            root_logger.removeHandler(handler)

    # Логи в stderr: stdout занят результатом конвертации
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(formatter)
    console_handler._pegon = True
    root_logger.addHandler(console_handler)
    root_logger.setLevel(logging.DEBUG if log_file else log_level)

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(formatter)
        file_handler._pegon = True
        root_logger.addHandler(file_handler)

    if quiet_http:
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        logging.getLogger("httpx").setLevel(logging.WARNING)

    return root_logger
