from functools import lru_cache

from app.config import get_settings
from app.llm.parser import CommandParser
from app.pipeline import AssistantPipeline


@lru_cache
def get_pipeline() -> AssistantPipeline:
    settings = get_settings()
    parser = CommandParser(
        api_key=settings.deepseek_api_key,
        model=settings.deepseek_model,
        base_url=settings.deepseek_base_url,
        timeout=settings.upstream_timeout,
    )
    return AssistantPipeline(parser)
