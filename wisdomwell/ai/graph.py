import logging
from typing import TypedDict

from langchain_core.runnables import RunnableConfig
from langgraph.graph import StateGraph, START, END

from wisdomwell.ai.llm_client import get_model, send_structured_prompt
from wisdomwell.ai.postprocess import clean_entry
from wisdomwell.ai.prompts.scripture_retrieval import create_prompt
from wisdomwell.ai.schema import Religion, ScriptureEntry, ScriptureRetrievalOutput

logger = logging.getLogger(__name__)


class RetrievalState(TypedDict, total=False):
    question: str
    religions: list[Religion]
    entries: list[ScriptureEntry]


def should_retrieve(state: RetrievalState):
    # the form should catch this, but never send an empty selection to the model
    if state.get("religions"):
        return "retrieve"

    return END


def retrieve_node(state: RetrievalState, config: RunnableConfig):
    model = config.get("configurable", {}).get("model") or get_model()
    prompt = create_prompt(state["question"], state["religions"])
    output = send_structured_prompt(prompt, ScriptureRetrievalOutput, model)
    return {"entries": output.scripture_entries}


def clean_node(state: RetrievalState):
    requested = set(state["religions"])
    for entry in state["entries"]:
        if entry.religion not in requested:
            logger.warning(
                "Model returned an entry for unrequested religion=%s scripture=%s",
                entry.religion.value,
                entry.scripture,
            )
    return {"entries": [clean_entry(entry) for entry in state["entries"]]}


def build_retrieval_graph():
    """
    One model call per request: retrieve, then clean the insights.
    An empty religion set goes straight to END without calling the model.
    A model can be passed per run as ``config={"configurable": {"model": ...}}``;
    otherwise the shared Gemini model is used.
    """
    graph = StateGraph(RetrievalState)

    graph.add_node("retrieve", retrieve_node)
    graph.add_node("clean", clean_node)

    graph.add_conditional_edges(START,
                                should_retrieve,
                                {
                                    "retrieve": "retrieve",
                                    END: END
                                },
                                )

    graph.add_edge("retrieve", "clean")
    graph.add_edge("clean", END)

    return graph.compile()


retrieval_graph = build_retrieval_graph()
