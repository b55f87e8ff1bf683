import logging

from fastapi import FastAPI, UploadFile, File, HTTPException, Request
from fastapi.responses import JSONResponse

from .errors import SvParseError
from .models import ParseResponse, SeparatorResponse, HealthResponse, ErrorResponse
from .parser import parse_bytes
from .reader import decode_lines
from .rules import DEFAULT_HAS_HEADERS, DEFAULT_SUPPRESS_AMBIGUITY, SUPPORTED_SUFFIXES
from .separator import infer_separator

logger = logging.getLogger(__name__)

app = FastAPI(
    title="svparse",
    description="Separator inference and record access for delimiter-separated files",
    version="0.1.0",
)


@app.exception_handler(SvParseError)
async def parse_error_handler(request: Request, exc: SvParseError):
    logger.warning("rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": exc.to_dict()})


async def _read_upload(file: UploadFile) -> bytes:
    if not (file.filename or "").lower().endswith(SUPPORTED_SUFFIXES):
        raise HTTPException(
            status_code=422,
            detail="Only %s files are supported" % ", ".join(SUPPORTED_SUFFIXES),
        )
    return await file.read()


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True}


@app.post("/separator", response_model=SeparatorResponse, responses={422: {"model": ErrorResponse}})
async def separator(
    file: UploadFile = File(...),
    has_headers: bool = DEFAULT_HAS_HEADERS,
    suppress_ambiguity: bool = DEFAULT_SUPPRESS_AMBIGUITY,
):
    raw = await _read_upload(file)
    lines, encoding = decode_lines(raw)
    sep = infer_separator(lines, has_headers, suppress_ambiguity)
    logger.info("inferred separator %r for %s (%d lines)", sep, file.filename, len(lines))
    return {"separator": sep, "encoding": encoding, "lines": len(lines)}


@app.post("/parse", response_model=ParseResponse, responses={422: {"model": ErrorResponse}})
async def parse(
    file: UploadFile = File(...),
    has_headers: bool = DEFAULT_HAS_HEADERS,
    suppress_ambiguity: bool = DEFAULT_SUPPRESS_AMBIGUITY,
):
    raw = await _read_upload(file)
    table, encoding = parse_bytes(raw, has_headers, suppress_ambiguity)
    logger.info("parsed %s: separator=%r records=%d", file.filename, table.separator, len(table))
    return {
        "separator": table.separator,
        "encoding": encoding,
        "headers": list(table.headers) if table.headers is not None else None,
        "record_count": len(table),
        "records": [list(record) for record in table],
        "table": table.render(),
    }
