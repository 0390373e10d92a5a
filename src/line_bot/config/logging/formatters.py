"""Formatter JSON dos logs do SDK (python-json-logger).

Cada linha traz os campos base abaixo; campos passados via `extra` pelo
conector (method, endpoint, status_code, is_permanent) são anexados pelo
próprio JsonFormatter. Nunca logar tokens, ids de usuário ou textos.
"""

from __future__ import annotations

from pythonjsonlogger.json import JsonFormatter

# Campos base, na ordem em que aparecem no JSON
REQUIRED_LOG_FIELDS: tuple[str, ...] = (
    "asctime",
    "levelname",
    "name",
    "message",
    "correlation_id",
    "service",
)

# Nomes do LogRecord -> nomes publicados
FIELD_RENAME_MAP: dict[str, str] = {
    "asctime": "timestamp",
    "levelname": "level",
    "name": "logger",
}


def create_json_formatter(fields: tuple[str, ...] = REQUIRED_LOG_FIELDS) -> JsonFormatter:
    """Cria o formatter JSON.

    Exemplo de linha para uma chamada à API:
        {"timestamp": "...", "level": "DEBUG", "logger": "line_bot.connectors.line_logging",
         "message": "Chamada LINE bem-sucedida", "correlation_id": "<x-line-request-id>",
         "service": "line_bot_sdk", "method": "POST", "endpoint": "/v2/bot/message/push",
         "status_code": 200}
    """
    return JsonFormatter(
        " ".join(f"%({name})s" for name in fields),
        rename_fields={k: v for k, v in FIELD_RENAME_MAP.items() if k in fields},
        json_ensure_ascii=False,
    )
