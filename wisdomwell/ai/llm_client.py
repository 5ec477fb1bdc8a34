import logging
from functools import lru_cache
from typing import Any, TypeVar

from langchain_core.language_models import BaseChatModel
from langchain_google_genai import ChatGoogleGenerativeAI
from pydantic import BaseModel

from wisdomwell import config

logger = logging.getLogger(__name__)

SchemaT = TypeVar("SchemaT", bound=BaseModel)


class EmptyModelOutputError(RuntimeError):
    """The model returned nothing that parses into the requested schema."""


@lru_cache(maxsize=1)
def get_model() -> BaseChatModel:
    """Create the shared Gemini chat model on first use."""
    logger.info("Creating chat model %s", config.GEMINI_MODEL)
    return ChatGoogleGenerativeAI(
        model=config.GEMINI_MODEL,
        google_api_key=config.GEMINI_API_KEY,
        temperature=config.GEMINI_TEMPERATURE,
        max_tokens=config.GEMINI_MAX_TOKENS,
    )


def preview(value: Any, limit: int = 200) -> str:
    """Return a safe, short preview string for logs."""
    try:
        s = str(value)
    except Exception:
        return "<unprintable>"
    if len(s) > limit:
        return s[:limit] + "...(truncated)"
    return s


def send_structured_prompt(prompt: str, schema: type[SchemaT], model: BaseChatModel) -> SchemaT:
    """Send a prompt to the model and parse the reply into ``schema``."""
    structured_model = model.with_structured_output(schema)
    response = structured_model.invoke(prompt)

    if response is None:
        raise EmptyModelOutputError(f"Model returned no {schema.__name__}")

    # some providers hand back a plain dict
    if not isinstance(response, schema):
        response = schema.model_validate(response)

    return response
