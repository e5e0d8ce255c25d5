import json
from typing import Any

import httpx
from loguru import logger
from openai import APIConnectionError, APIStatusError, OpenAI
from pydantic import ValidationError

from app.errors import ConfigurationError, InvalidAIResponseError, UpstreamAIError
from app.llm.prompts import build_system_prompt
from app.models.schemas import AddRecurringCommand, AddTransactionCommand


def _reject_constant(name: str):
    raise ValueError(f"non-standard JSON constant {name}")


COMMAND_MODELS = {
    "add_tx": AddTransactionCommand,
    "add_rec": AddRecurringCommand,
}


def check_command_shape(payload: Any) -> bool:
    """Log a warning when the model's reply is not one of the known commands.

    The payload is forwarded either way; this only flags drift in the model output.
    """
    if not isinstance(payload, dict):
        logger.warning("AI reply is not a JSON object: {}", type(payload).__name__)
        return False

    action = payload.get("action")
    model = COMMAND_MODELS.get(action) if isinstance(action, str) else None
    if model is None:
        logger.warning("AI reply has unknown action: {!r}", action)
        return False

    try:
        model.model_validate(payload)
    except ValidationError as e:
        logger.warning("AI reply does not match {} schema: {}", payload["action"], e.errors())
        return False
    return True


class CommandParser:
    def __init__(
        self,
        api_key: str,
        model: str = "deepseek-chat",
        base_url: str = "https://api.deepseek.com",
        timeout: float = 30.0,
        http_client: httpx.Client | None = None,
    ):
        self.api_key = api_key
        self.model = model
        self.client = None
        if api_key:
            self.client = OpenAI(
                base_url=base_url,
                api_key=api_key,
                timeout=timeout,
                max_retries=0,
                http_client=http_client,
            )

    def parse(self, text: str, categories: list[str] | None = None) -> Any:
        if self.client is None:
            logger.error("DEEPSEEK_API_KEY is not configured")
            raise ConfigurationError()

        messages = [
            {"role": "system", "content": build_system_prompt(categories)},
            {"role": "user", "content": text},
        ]

        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=messages,
                response_format={"type": "json_object"},
                temperature=0.1,
            )
        except APIStatusError as e:
            logger.error("DeepSeek returned {}: {}", e.status_code, e.response.text)
            raise UpstreamAIError() from e
        except APIConnectionError as e:
            # also covers APITimeoutError
            logger.error("DeepSeek request failed: {}", e)
            raise UpstreamAIError() from e

        return self.decode(response)

    def decode(self, response: Any) -> Any:
        try:
            raw = response.choices[0].message.content
        except (AttributeError, IndexError, TypeError):
            raw = None

        if raw is None:
            logger.error("DeepSeek completion has no message content")
            raise InvalidAIResponseError()

        logger.debug("LLM raw response: {}", raw)

        try:
            command = json.loads(raw, parse_constant=_reject_constant)
            # 1e400 and friends decode to inf without going through parse_constant
            json.dumps(command, allow_nan=False)
        except ValueError as e:
            logger.error("Failed to parse AI response as JSON: {} | raw={!r}", e, raw)
            raise InvalidAIResponseError() from e

        check_command_shape(command)
        return command
