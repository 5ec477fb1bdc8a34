from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_TARGET_LANGUAGE = "bn"


class Religion(str, Enum):
    HINDUISM = "Hinduism"
    ISLAM = "Islam"
    CHRISTIANITY = "Christianity"
    BUDDHISM = "Buddhism"
    JUDAISM = "Judaism"
    JAINISM = "Jainism"
    SIKHISM = "Sikhism"
    TAOISM = "Taoism"


ALL_RELIGIONS: tuple[Religion, ...] = tuple(Religion)


class ScriptureRetrievalInput(BaseModel):
    question: str = Field(min_length=1, description="The question to be answered using scripture.")
    religions: list[Religion] = Field(
        default_factory=list,
        description="The selected religions to search scriptures from.",
    )

    @field_validator("religions")
    @classmethod
    def _dedupe_religions(cls, value: list[Religion]) -> list[Religion]:
        # a set, but keep the order the caller picked
        return list(dict.fromkeys(value))


class ScriptureEntry(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    scripture: str = Field(description="The name of the scripture (e.g., Bhagavad Gita, Qur'an, Bible).")
    chapter: str = Field(description="The chapter, canto or section of the scripture (e.g., 3, Surah 51, Ang 1).")
    verses: str = Field(description="The verse(s) from the scripture (e.g., 19, 56, 13).")
    answer: str = Field(description="The direct quote from the scripture.")
    ai_insight: Optional[str] = Field(
        default=None,
        alias="aiInsight",
        description="A brief, respectful explanation of how the quote answers the question. "
                    "Plain explanation only, without a leading 'Purpose according to ...:' label.",
    )
    religion: Religion = Field(description="The religion associated with the scripture.")
    category: Optional[str] = Field(
        default=None,
        description="An optional category of the source text (e.g., Sruti, Hadith, Mahayana Sutra).",
    )


class ScriptureRetrievalOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    scripture_entries: list[ScriptureEntry] = Field(
        default_factory=list,
        alias="scriptureEntries",
        description="Scripture entries relevant to the question from the selected religions.",
    )


class TranslateTextInput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text_to_translate: str = Field(alias="textToTranslate", description="The text to be translated.")
    target_language: str = Field(
        default=DEFAULT_TARGET_LANGUAGE,
        alias="targetLanguage",
        min_length=2,
        max_length=16,
        description='The target language code (e.g., "bn" for Bengali, "es" for Spanish). Defaults to Bengali.',
    )


class TranslateTextOutput(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    translated_text: str = Field(alias="translatedText", description="The translated text.")
