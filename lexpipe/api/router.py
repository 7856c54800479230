"""
FastAPI router for tokenization and lemmatization endpoints.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status

from ..morphology import EnglishLemmatizer
from ..morphology.matcher import MorphemePair
from ..tokenization import EnglishTokenizer
from .schemas import (
    DecomposeResponse,
    LemmatizeResponse,
    MorphemeSchema,
    MorphRequest,
    TokenizeRequest,
    TokenizeResponse,
    TokenSchema,
)

logger = logging.getLogger(__name__)

# Create router
router = APIRouter(prefix="/api", tags=["lexpipe"])


def get_tokenizer(request: Request) -> Optional[EnglishTokenizer]:
    """Dependency to get the tokenizer from app state."""
    return getattr(request.app.state, "tokenizer", None)


def get_lemmatizer(request: Request) -> Optional[EnglishLemmatizer]:
    """Dependency to get the lemmatizer from app state."""
    return getattr(request.app.state, "lemmatizer", None)


def _require(component, name: str):
    if component is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{name} not initialized"
        )
    return component


def _morphemes(pair: Optional[MorphemePair]) -> Optional[DecomposeResponse]:
    if pair is None:
        return None
    base, affix = pair
    return DecomposeResponse(
        base=MorphemeSchema(form=base.form, pos=base.pos),
        affix=MorphemeSchema(form=affix.form, pos=affix.pos),
    )


@router.post("/tokenize", response_model=TokenizeResponse)
async def tokenize(
    payload: TokenizeRequest,
    tokenizer: Optional[EnglishTokenizer] = Depends(get_tokenizer),
):
    tokenizer = _require(tokenizer, "Tokenizer")
    result = tokenizer.tokenize(payload.text, trace=payload.trace)
    logger.debug(f"🔤 Tokenized {len(payload.text)} chars into {len(result.tokens)} tokens")

    return TokenizeResponse(
        tokens=[TokenSchema(text=t.text, protected=t.protected) for t in result.tokens],
        normalized_text=result.normalized_text,
        debug=result.debug,
    )


@router.post("/lemmatize", response_model=LemmatizeResponse)
async def lemmatize(
    payload: MorphRequest,
    lemmatizer: Optional[EnglishLemmatizer] = Depends(get_lemmatizer),
):
    lemmatizer = _require(lemmatizer, "Lemmatizer")
    return LemmatizeResponse(
        form=payload.form,
        pos=payload.pos,
        lemma=lemmatizer.get_lemma(payload.form, payload.pos),
        morphemes=_morphemes(lemmatizer.analyze(payload.form, payload.pos)),
    )


@router.post("/decompose", response_model=Optional[DecomposeResponse])
async def decompose(
    payload: MorphRequest,
    lemmatizer: Optional[EnglishLemmatizer] = Depends(get_lemmatizer),
):
    """Base + affix morphemes of an inflected form; null when no matcher applies."""
    lemmatizer = _require(lemmatizer, "Lemmatizer")
    return _morphemes(lemmatizer.analyze(payload.form, payload.pos))
