"""Transport-agnostic request handling shared by the HTTP app and the function handler."""

import base64
import binascii
import json
from typing import Any

from loguru import logger

from app.errors import AssistantError, MissingTextError
from app.llm.parser import CommandParser
from app.models.schemas import AssistantRequest, AssistantResult


def decode_payload(body: bytes | str | None, is_base64: bool = False) -> Any:
    if body is None:
        return None
    try:
        if is_base64:
            body = base64.b64decode(body)
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        if not body.strip():
            return None
        return json.loads(body)
    except (binascii.Error, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning("Could not decode request body: {}", e)
        return None


def normalize_request(payload: Any) -> AssistantRequest:
    if not isinstance(payload, dict):
        raise MissingTextError()

    text = payload.get("text")
    if not isinstance(text, str) or not text.strip():
        raise MissingTextError()

    categories = payload.get("categories")
    if not isinstance(categories, list):
        categories = []
    categories = [str(c).strip() for c in categories if c is not None and str(c).strip()]

    return AssistantRequest(text=text, categories=categories)


class AssistantPipeline:
    def __init__(self, parser: CommandParser):
        self.parser = parser

    def handle(self, payload: Any) -> AssistantResult:
        try:
            request = normalize_request(payload)
            logger.info("Assistant request: {!r} ({} categories)", request.text, len(request.categories))
            command = self.parser.parse(request.text, request.categories)
        except AssistantError as e:
            logger.warning("Assistant request failed with {}: {}", e.status_code, e.message)
            return AssistantResult(status_code=e.status_code, body={"error": e.message})
        except Exception as e:
            logger.exception("Unexpected error handling assistant request")
            return AssistantResult(status_code=500, body={"error": str(e)})

        return AssistantResult(status_code=200, body=command)
