"""Утилиты для настройки логирования приложения."""
from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def setup_logging(level: str | None = None, log_file: str | None = None) -> None:
    """Настроить логирование в stderr и, если задан файл, в файл.

    Явные аргументы важнее переменных окружения SEARCHSERVER_LOG_LEVEL и
    SEARCHSERVER_LOG_FILE. Пустое имя файла отключает файловый лог.
    """
    root_logger = logging.getLogger()
    if root_logger.handlers:
        return

    level_name = (level or os.getenv("SEARCHSERVER_LOG_LEVEL", "INFO")).upper()
    root_logger.setLevel(getattr(logging, level_name, logging.INFO))
    formatter = logging.Formatter(LOG_FORMAT)

    # stdout is reserved for search results in the console app
    stream_handler = logging.StreamHandler(sys.stderr)
    stream_handler.setFormatter(formatter)
    root_logger.addHandler(stream_handler)

    file_name = log_file if log_file is not None else os.getenv("SEARCHSERVER_LOG_FILE", "searchserver.log")
    if file_name:
        log_path = Path(file_name)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)


__all__ = ["setup_logging", "LOG_FORMAT"]
