import random
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from pydantic import BaseModel, Field, constr

from lipsum import (
    MarkovChain,
    default_chain,
    lipsum_title_with_rng,
    lipsum_with_rng,
    lipsum_words_with_rng,
)
from lipsum.corpus import CORPORA

app = FastAPI(title="lipsum: lorem ipsum text generation")

MAX_LENGTH = 1000


def _rng(seed: Optional[int]) -> random.Random:
    return random.Random(seed) if seed is not None else random.Random()


# -----------------------
# Request / response schemas
# -----------------------
class TextGenerationRequest(BaseModel):
    corpus: constr(strip_whitespace=True, min_length=1)
    length: int = Field(25, ge=0, le=MAX_LENGTH)

    # two words, e.g. "Lorem ipsum"; random start when omitted
    start_words: Optional[str] = None
    seed: Optional[int] = None


class GenerationResponse(BaseModel):
    generated_text: str
    mode: str


# -----------------------
# Root & status
# -----------------------
@app.get("/")
def root():
    return {"status": "lipsum API Active"}


@app.get("/chain/status")
def chain_status():
    chain = default_chain()
    return {
        "bigrams": len(chain),
        "corpora": list(CORPORA),
    }


# -----------------------
# Default chain endpoints
# -----------------------
@app.get("/lipsum", response_model=GenerationResponse)
def get_lipsum(
    length: int = Query(25, ge=0, le=MAX_LENGTH),
    seed: Optional[int] = None,
):
    try:
        text = lipsum_with_rng(_rng(seed), length)
    except Exception as e:
        print(f"[lipsum] Generation failed: {e}")
        raise HTTPException(status_code=500, detail=f"Lipsum generation failed: {e}")
    return {"generated_text": text, "mode": "lipsum"}


@app.get("/lipsum/words", response_model=GenerationResponse)
def get_lipsum_words(
    length: int = Query(25, ge=0, le=MAX_LENGTH),
    seed: Optional[int] = None,
):
    try:
        text = lipsum_words_with_rng(_rng(seed), length)
    except Exception as e:
        print(f"[lipsum] Generation failed: {e}")
        raise HTTPException(status_code=500, detail=f"Lipsum generation failed: {e}")
    return {"generated_text": text, "mode": "words"}


@app.get("/lipsum/title", response_model=GenerationResponse)
def get_lipsum_title(seed: Optional[int] = None):
    try:
        text = lipsum_title_with_rng(_rng(seed))
    except Exception as e:
        print(f"[lipsum] Title generation failed: {e}")
        raise HTTPException(status_code=500, detail=f"Title generation failed: {e}")
    return {"generated_text": text, "mode": "title"}


# -----------------------
# Custom corpus endpoint
# -----------------------
@app.post("/generate", response_model=GenerationResponse)
def generate_text(req: TextGenerationRequest):
    start = None
    if req.start_words is not None:
        start = tuple(req.start_words.split())
        if len(start) != 2:
            raise HTTPException(
                status_code=400,
                detail="start_words must contain exactly two words",
            )

    try:
        chain = MarkovChain()
        chain.learn(req.corpus)
        rng = _rng(req.seed)
        if start is None:
            text = chain.generate_with_rng(rng, req.length)
        else:
            text = chain.generate_with_rng_from(rng, req.length, start)
    except Exception as e:
        print(f"[generate] Failed: {e}")
        raise HTTPException(status_code=500, detail=f"Markov generation failed: {e}")

    return {"generated_text": text, "mode": "custom" if start is None else "custom_from"}
