"""
GeoAudit — FastAPI backend

Endpoints:
  POST /analyze          — SEO + GEO audit of one URL (stored)
  POST /compare          — audit two URLs and compare them
  POST /visibility       — AI platform visibility assessment of one URL
  GET  /reports          — stored reports (optionally ?url=...)
  GET  /reports/{id}     — one stored report
  GET  /health           — Health check
"""

import logging
from contextlib import asynccontextmanager
from urllib.parse import urlparse

from fastapi import Depends, FastAPI, Header, HTTPException
from pydantic import BaseModel, ConfigDict, HttpUrl, TypeAdapter, ValidationError
from pydantic.alias_generators import to_camel

from . import config, engine
from .analyzers.suggestions import strategy_named
from .errors import AuditError
from .log import setup_logging
from .models import AiVisibilityAssessment, AuditOptions, AuditReport, ComparisonResult
from .storage import ReportStore

logger = logging.getLogger(__name__)

BLOCKED_HOSTS = ["localhost", "127.0.0.1", "0.0.0.0", "::1"]
PRIVATE_PREFIXES = ("10.", "192.168.", "172.16.")

store = ReportStore()
_http_url = TypeAdapter(HttpUrl)


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # Fail at startup rather than on the first audit
    strategy = strategy_named(config.SUGGESTION_STRATEGY)
    logger.info("Suggestion strategy: %s", strategy.name)
    if not config.API_SECRET:
        logger.warning("API_SECRET_KEY not set. The API accepts unauthenticated requests.")
    yield


app = FastAPI(
    title="GeoAudit",
    version="1.0.0",
    lifespan=lifespan,
)


class _Request(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    include_traditional_seo: bool = True
    include_geo: bool = True
    include_content_suggestions: bool = True

    def options(self) -> AuditOptions:
        return AuditOptions(
            include_traditional_seo=self.include_traditional_seo,
            include_geo=self.include_geo,
            include_content_suggestions=self.include_content_suggestions,
        )


class AnalyzeRequest(_Request):
    url: HttpUrl


class CompareRequest(_Request):
    url1: HttpUrl
    url2: HttpUrl


class VisibilityRequest(BaseModel):
    url: HttpUrl


def get_store() -> ReportStore:
    return store


def check_api_key(x_api_key: str = Header(default="")):
    if config.API_SECRET and x_api_key != config.API_SECRET:
        raise HTTPException(status_code=401, detail="Invalid API key")


def reject_private(url: str) -> str:
    hostname = urlparse(url).hostname
    if hostname in BLOCKED_HOSTS or (hostname and hostname.startswith(PRIVATE_PREFIXES)):
        raise HTTPException(status_code=400, detail="Private/local URLs not allowed")
    return url


def normalize_report_url(url: str) -> str:
    """Stored report URLs went through HttpUrl; lookups must too."""
    try:
        return str(_http_url.validate_python(url))
    except ValidationError:
        return url


async def _guarded(coro, action: str):
    try:
        return await coro
    except AuditError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception:
        logger.exception("%s failed", action)
        raise HTTPException(status_code=500, detail=f"Failed to {action}")


@app.get("/health")
async def health():
    return {"status": "ok", "engine": "geoaudit"}


@app.post("/analyze", response_model=AuditReport, dependencies=[Depends(check_api_key)])
async def analyze(req: AnalyzeRequest, reports: ReportStore = Depends(get_store)):
    url = reject_private(str(req.url))
    _, report = await _guarded(
        engine.run_audit(url, reports, req.options()), "analyze website",
    )
    return report


@app.post("/compare", response_model=ComparisonResult, dependencies=[Depends(check_api_key)])
async def compare(req: CompareRequest, reports: ReportStore = Depends(get_store)):
    url1 = reject_private(str(req.url1))
    url2 = reject_private(str(req.url2))
    return await _guarded(
        engine.run_comparison(url1, url2, reports, req.options()), "compare websites",
    )


@app.post("/visibility", response_model=AiVisibilityAssessment, dependencies=[Depends(check_api_key)])
async def visibility(req: VisibilityRequest):
    url = reject_private(str(req.url))
    return await _guarded(engine.run_visibility(url), "assess AI visibility")


@app.get("/reports", response_model=list[AuditReport], dependencies=[Depends(check_api_key)])
async def list_reports(url: str | None = None, reports: ReportStore = Depends(get_store)):
    if url:
        return reports.list_by_url(normalize_report_url(url))
    return reports.list_all()


@app.get("/reports/{report_id}", response_model=AuditReport, dependencies=[Depends(check_api_key)])
async def get_report(report_id: int, reports: ReportStore = Depends(get_store)):
    report = reports.get(report_id)
    if not report:
        raise HTTPException(status_code=404, detail="Audit report not found")
    return report


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("geoaudit.main:app", host="0.0.0.0", port=config.PORT, reload=True)
