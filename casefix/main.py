from contextlib import asynccontextmanager
from functools import lru_cache

from fastapi import Depends, FastAPI, Request, UploadFile, File, HTTPException
from fastapi.responses import JSONResponse
from .correct import correct_csv_bytes
from .exceptions import MalformedRecordError, OverrideTableError
from .lexicon import LexiconGateway
from .models import CorrectResponse, HealthResponse
from .overrides import OverrideTable, load_overrides
from .rules import OVERRIDES_PATH


@lru_cache(maxsize=None)
def get_overrides() -> OverrideTable:
    return load_overrides(OVERRIDES_PATH)


@lru_cache(maxsize=None)
def get_gateway() -> LexiconGateway:
    return LexiconGateway()


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Load both up front: a bad overrides file stops startup, and a missing
    # WordNet corpus is reported before the first request.
    get_overrides()
    get_gateway()
    yield


app = FastAPI(
    title="casefix",
    description="Sentence-case correction for shouted CSV descriptions",
    version="0.1.0",
    lifespan=lifespan,
)


@app.exception_handler(OverrideTableError)
async def override_table_error(request: Request, exc: OverrideTableError):
    return JSONResponse(status_code=500, content={"detail": f"override table misconfigured: {exc}"})


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}

@app.post("/correct", response_model=CorrectResponse)
async def correct_csv(
    file: UploadFile = File(...),
    overrides: OverrideTable = Depends(get_overrides),
    gateway: LexiconGateway = Depends(get_gateway),
):
    if not file.filename.lower().endswith(".csv"):
        raise HTTPException(status_code=422, detail="Only CSV files are supported")

    raw = await file.read()
    try:
        return await correct_csv_bytes(raw, overrides, gateway)
    except MalformedRecordError as e:
        raise HTTPException(status_code=422, detail=str(e))
