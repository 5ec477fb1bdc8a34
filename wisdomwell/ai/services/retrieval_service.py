# validates the query, runs the retrieval graph
# returns the cleaned ScriptureRetrievalOutput
import logging
from typing import Any, Optional, Union

from langchain_core.language_models import BaseChatModel

from wisdomwell.ai.graph import retrieval_graph
from wisdomwell.ai.llm_client import preview
from wisdomwell.ai.schema import ScriptureRetrievalInput, ScriptureRetrievalOutput

logger = logging.getLogger(__name__)


def scripture_retrieval(
    query: Union[ScriptureRetrievalInput, dict[str, Any]],
    model: Optional[BaseChatModel] = None,
) -> ScriptureRetrievalOutput:
    query = ScriptureRetrievalInput.model_validate(query)

    logger.info(
        "flow_called scripture_retrieval religions=%s question=%s",
        [religion.value for religion in query.religions],
        preview(query.question),
    )

    state = {"question": query.question, "religions": query.religions}

    try:
        result = retrieval_graph.invoke(
            state,
            config={"configurable": {"model": model}},
        )
    except Exception:
        logger.exception("flow_error scripture_retrieval question=%s", preview(query.question))
        raise

    entries = result.get("entries", [])
    logger.info("flow_return scripture_retrieval entries=%d", len(entries))
    return ScriptureRetrievalOutput(scripture_entries=entries)
