"""
Логирование

JSON-формат для машинной обработки, текстовый для локальной работы.
setup_logging вызывается один раз приложением, которое использует библиотеку;
сама библиотека только пишет в логгеры своих модулей.
"""

import json
import logging
from datetime import datetime, timezone


class JSONFormatter(logging.Formatter):
    """Запись лога как одна JSON-строка."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "json") -> logging.Handler:
    """
    Настроить логгер пакета contact_domain.

    Args:
        level: Имя уровня ('DEBUG', 'INFO', ...); неизвестное -> INFO
        fmt: 'json' или 'text'

    Returns:
        Добавленный handler (чтобы вызывающий мог его снять)
    """
    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )

    logger = logging.getLogger("contact_domain")
    logger.addHandler(handler)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    return handler
