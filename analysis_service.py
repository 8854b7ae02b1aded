from fastapi import FastAPI, UploadFile, File, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse
from pydantic import BaseModel
from typing import Dict, Any, List
from pathlib import Path
import hashlib
import logging
import os

# Our modules
from red_flag_analyzer import AnalysisResult, analyze_resume, get_risk_level, result_to_dict
from red_flag_patterns import VERSIONS

logger = logging.getLogger(__name__)

SERVICE_VERSION = "1.0"

# Configuration (environment)
API_KEY = os.getenv("REDFLAG_API_KEY", "")
MAX_BULK_FILES = int(os.getenv("REDFLAG_MAX_BULK_FILES", "50"))
# Address matching slows down sharply on very long text
MAX_TEXT_CHARS = int(os.getenv("REDFLAG_MAX_TEXT_CHARS", "12000"))
OPEN_PATHS = ("/", "/health", "/docs", "/openapi.json", "/redoc")

# Read as text only; these are not parsed
BINARY_SUFFIXES = {".pdf", ".docx", ".doc"}

app = FastAPI(
    title="Resume Red Flag Analyzer",
    version=SERVICE_VERSION,
    description="Detects PII, biased language, exaggeration and clarity issues in resume text",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class APIKeyMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request, call_next):
        if request.url.path in OPEN_PATHS:
            return await call_next(request)
        # Key is only enforced when configured
        if API_KEY and request.headers.get("x-api-key") != API_KEY:
            return JSONResponse({"detail": "Unauthorized"}, status_code=401)
        return await call_next(request)


app.add_middleware(APIKeyMiddleware)


class AnalyzeRequest(BaseModel):
    resume_text: str


def extract_text_from_upload(filename: str, content: bytes) -> str:
    """
    Decode an uploaded file as UTF-8 text.
    Undecodable bytes are dropped; a failed decode gives "" which the
    analyzer scores as an empty resume.
    """
    suffix = Path(filename or "").suffix.lower()
    if suffix in BINARY_SUFFIXES:
        logger.warning("%s is a %s file; reading it as plain text", filename, suffix)
    return content.decode("utf-8", errors="ignore")


def check_text_size(text: str, source: str = "resume_text") -> None:
    if len(text) > MAX_TEXT_CHARS:
        raise HTTPException(
            status_code=413,
            detail=f"{source} is {len(text)} characters; maximum is {MAX_TEXT_CHARS}",
        )


def sha256_hex(s: str) -> str:
    return hashlib.sha256(s.encode("utf-8")).hexdigest()


def version_block() -> Dict[str, str]:
    out = dict(VERSIONS)
    out["service"] = SERVICE_VERSION
    return out


def build_response(result: AnalysisResult, resume_text: str) -> Dict[str, Any]:
    """Analysis dict plus risk level and determinism info"""
    return {
        **result_to_dict(result),
        "risk_level": get_risk_level(result),
        "determinism": {
            "content_hash": sha256_hex(resume_text),
        },
        "scoring_version": version_block(),
    }


@app.get("/")
def root():
    return {
        "service": "Resume Red Flag Analyzer",
        "version": SERVICE_VERSION,
        "description": "Resume red-flag detection and scoring",
        "features": [
            "PII detection (addresses, phone numbers, SSNs, dates of birth)",
            "Biased language detection",
            "Exaggeration and passive-voice detection",
            "Category scores, compliance checks and risk level",
            f"Bulk upload (up to {MAX_BULK_FILES} resumes)",
        ],
    }


@app.get("/health")
def health():
    return {"status": "ok", "version": SERVICE_VERSION}


@app.post("/analyze")
def analyze(req: AnalyzeRequest):
    check_text_size(req.resume_text)
    result = analyze_resume(req.resume_text)
    logger.info("Analyzed pasted text: %d issues, score %d", result.total_issues, result.overall_score)
    return build_response(result, req.resume_text)


@app.post("/analyze_file")
async def analyze_file(file: UploadFile = File(...)):
    """Upload a single resume"""
    content = await file.read()
    text = extract_text_from_upload(file.filename, content)
    check_text_size(text, file.filename)

    result = await run_in_threadpool(analyze_resume, text)
    logger.info("Analyzed %s: %d issues, score %d", file.filename, result.total_issues, result.overall_score)

    response = build_response(result, text)
    response["filename"] = file.filename
    return response


@app.post("/analyze_bulk")
async def analyze_bulk(files: List[UploadFile] = File(...)):
    """Upload up to MAX_BULK_FILES resumes and get a batch summary"""
    if len(files) > MAX_BULK_FILES:
        raise HTTPException(status_code=400, detail=f"Maximum {MAX_BULK_FILES} files per batch")

    results = []
    errors = []

    for file in files:
        try:
            content = await file.read()
            text = extract_text_from_upload(file.filename, content)
            check_text_size(text, file.filename)
            result = await run_in_threadpool(analyze_resume, text)

            results.append({
                "filename": file.filename,
                "overall_score": result.overall_score,
                "risk_level": get_risk_level(result),
                "total_issues": result.total_issues,
                "content_hash": sha256_hex(text),
                "status": "success",
            })

        except HTTPException as e:
            logger.warning("Skipped %s: %s", file.filename, e.detail)
            errors.append({
                "filename": file.filename,
                "error": e.detail,
                "status": "failed",
            })

        except Exception as e:
            logger.warning("Failed to analyze %s: %s", file.filename, e)
            errors.append({
                "filename": file.filename,
                "error": str(e),
                "status": "failed",
            })

    return {
        "total_files": len(files),
        "successful": len(results),
        "failed": len(errors),
        "results": results,
        "errors": errors,
    }


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=logging.INFO)
    uvicorn.run(
        app,
        host=os.getenv("REDFLAG_HOST", "0.0.0.0"),
        port=int(os.getenv("REDFLAG_PORT", "8000")),
    )
