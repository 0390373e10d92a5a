"""Configuração de logging estruturado (JSON via python-json-logger).

Uso:
    from line_bot.config.logging import configure_logging, get_logger

    configure_logging(level="INFO", service_name="meu_bot")
    logger = get_logger(__name__)
"""

from line_bot.config.logging.config import configure_logging, get_logger
from line_bot.config.logging.filters import CorrelationIdFilter
from line_bot.config.logging.formatters import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    create_json_formatter,
)

__all__ = [
    "FIELD_RENAME_MAP",
    "REQUIRED_LOG_FIELDS",
    "CorrelationIdFilter",
    "configure_logging",
    "create_json_formatter",
    "get_logger",
]
