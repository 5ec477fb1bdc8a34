from typing import Optional

from wisdomwell.ai.schema import ScriptureEntry

INSIGHT_LABEL = "Purpose according to {scripture}:"


def strip_insight_prefix(insight: Optional[str], scripture: str) -> Optional[str]:
    """
    Remove a leading "Purpose according to <scripture>:" label from an insight.

    The client renders that label itself, so a model that echoes it would show it
    twice. Matching ignores case; the rest of the text is returned untouched apart
    from its leading whitespace. Repeated labels are all removed, so applying this
    twice gives the same result as applying it once.
    """
    if insight is None:
        return None

    # compare on the original length; lower() can change it (e.g. "İ")
    label = INSIGHT_LABEL.format(scripture=scripture)
    cleaned = insight
    while cleaned[:len(label)].casefold() == label.casefold():
        cleaned = cleaned[len(label):].lstrip()

    return cleaned


def clean_entry(entry: ScriptureEntry) -> ScriptureEntry:
    cleaned = strip_insight_prefix(entry.ai_insight, entry.scripture)
    if cleaned == entry.ai_insight:
        return entry
    return entry.model_copy(update={"ai_insight": cleaned})
