from contextlib import asynccontextmanager
from typing import Annotated, Optional
import logging

import uvicorn
from fastapi import FastAPI, Depends, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from langchain_core.language_models import BaseChatModel
from pydantic import BaseModel, ConfigDict, Field

from wisdomwell import config
from wisdomwell.ai.llm_client import get_model
from wisdomwell.ai.prompts.catalogue import RELIGION_SYMBOLS
from wisdomwell.ai.schema import (
    ALL_RELIGIONS,
    DEFAULT_TARGET_LANGUAGE,
    Religion,
    ScriptureRetrievalInput,
    ScriptureRetrievalOutput,
    TranslateTextInput,
    TranslateTextOutput,
)
from wisdomwell.ai.services.retrieval_service import scripture_retrieval
from wisdomwell.ai.services.translation_service import translate_text

logger = logging.getLogger(__name__)

ModelDep = Annotated[BaseChatModel, Depends(get_model)]

MIN_QUESTION_LENGTH = 10


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(
        level=config.LOG_LEVEL,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    logger.info("Starting WisdomWell backend")
    yield
    logger.info("Shutting down WisdomWell backend")


app = FastAPI(title="WisdomWell", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class ScriptureRequest(BaseModel):
    question: str = Field(min_length=MIN_QUESTION_LENGTH, max_length=8000)
    religions: list[Religion] = Field(min_length=1)


class TranslateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    text_to_translate: str = Field(alias="textToTranslate", min_length=1, max_length=8000)
    target_language: Optional[str] = Field(default=None, alias="targetLanguage", min_length=2, max_length=16)


class ReligionInfo(BaseModel):
    name: Religion
    symbol: str


@app.get("/")
async def root():
    return {"Health": "OK"}


@app.get("/api/religions", response_model=list[ReligionInfo])
async def list_religions() -> list[ReligionInfo]:
    return [ReligionInfo(name=religion, symbol=RELIGION_SYMBOLS[religion]) for religion in ALL_RELIGIONS]


@app.post("/api/scriptures", response_model=ScriptureRetrievalOutput)
def scriptures(req: ScriptureRequest, model: ModelDep) -> ScriptureRetrievalOutput:
    query = ScriptureRetrievalInput(question=req.question, religions=req.religions)

    try:
        return scripture_retrieval(query, model=model)
    except Exception as e:
        logger.exception("Scripture retrieval error")
        raise HTTPException(status_code=500, detail="Scripture retrieval failed") from e


@app.post("/api/translate", response_model=TranslateTextOutput)
def translate(req: TranslateRequest, model: ModelDep) -> TranslateTextOutput:
    request = TranslateTextInput(
        text_to_translate=req.text_to_translate,
        target_language=req.target_language or DEFAULT_TARGET_LANGUAGE,
    )

    try:
        return translate_text(request, model=model)
    except Exception as e:
        logger.exception("Translation error")
        raise HTTPException(status_code=500, detail="Translation failed") from e


def main():
    uvicorn.run(app, host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    main()
