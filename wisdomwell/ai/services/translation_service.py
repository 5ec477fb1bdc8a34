import logging
from typing import Any, Optional, Union

from langchain_core.language_models import BaseChatModel

from wisdomwell.ai.llm_client import preview, get_model, send_structured_prompt
from wisdomwell.ai.prompts.translate_text import create_prompt
from wisdomwell.ai.schema import TranslateTextInput, TranslateTextOutput

logger = logging.getLogger(__name__)


def translate_text(
    request: Union[TranslateTextInput, dict[str, Any]],
    model: Optional[BaseChatModel] = None,
) -> TranslateTextOutput:
    """Translate one text field. Every call is independent; nothing is cached."""
    request = TranslateTextInput.model_validate(request)

    logger.info(
        "flow_called translate_text target_language=%s text=%s",
        request.target_language,
        preview(request.text_to_translate),
    )

    prompt = create_prompt(request.text_to_translate, request.target_language)

    try:
        output = send_structured_prompt(prompt, TranslateTextOutput, model or get_model())
    except Exception:
        logger.exception("flow_error translate_text target_language=%s", request.target_language)
        raise

    logger.info("flow_return translate_text result=%s", preview(output.translated_text))
    return output
