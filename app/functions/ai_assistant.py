# AWS Lambda entry point behind an API Gateway proxy integration (REST payload v1.0);
# configure the function handler as app.functions.ai_assistant.handler.

import json

from loguru import logger

from app.api.cors import CORS_HEADERS
from app.config import configure_logging, get_settings
from app.deps import get_pipeline
from app.pipeline import decode_payload

configure_logging(get_settings().log_level)


def handler(event, context=None):
    method = (event.get("httpMethod") or "").upper()

    if method == "OPTIONS":
        return {"statusCode": 200, "headers": dict(CORS_HEADERS), "body": ""}

    if method != "POST":
        logger.info("Rejected {} request", method or "<none>")
        return {"statusCode": 405, "headers": dict(CORS_HEADERS), "body": "Método não permitido"}

    payload = decode_payload(event.get("body"), bool(event.get("isBase64Encoded")))
    result = get_pipeline().handle(payload)
    logger.info("POST → {}", result.status_code)

    return {
        "statusCode": result.status_code,
        "headers": {**CORS_HEADERS, "Content-Type": "application/json"},
        "body": json.dumps(result.body, ensure_ascii=False),
    }
