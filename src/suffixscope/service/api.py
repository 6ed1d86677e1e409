from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from suffixscope.config import get_psl_path
from suffixscope.exceptions import InvalidDomain, NotMatchable, RuleSourceError, UnknownSection
from suffixscope.resolver import SuffixResolver
from suffixscope.service.schemas import DomainRequest, PublicSuffixResponse, ResolveResponse

logger = logging.getLogger(__name__)

app = FastAPI(title="suffixscope Public Suffix Service", version="0.1.0")

RESOLVER: SuffixResolver | None = None


def _load_resolver() -> SuffixResolver:
    global RESOLVER
    if RESOLVER is None:
        RESOLVER = SuffixResolver.from_path(get_psl_path())
    return RESOLVER


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/resolve", response_model=ResolveResponse)
def resolve_endpoint(req: DomainRequest) -> ResolveResponse:
    try:
        resolver = _load_resolver()
    except RuleSourceError as exc:
        raise HTTPException(status_code=503, detail="Public Suffix List missing. Run download-psl first.") from exc
    return ResolveResponse(**resolver.resolve(req.domain, req.section).to_dict())


@app.post("/public-suffix", response_model=PublicSuffixResponse)
def public_suffix_endpoint(req: DomainRequest) -> PublicSuffixResponse:
    try:
        resolver = _load_resolver()
        suffix = resolver.get_public_suffix(req.domain, req.section)
    except RuleSourceError as exc:
        raise HTTPException(status_code=503, detail="Public Suffix List missing. Run download-psl first.") from exc
    except UnknownSection as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except (NotMatchable, InvalidDomain) as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    except Exception as exc:
        logger.exception("Failed to find public suffix")
        raise HTTPException(status_code=500, detail=f"Public suffix lookup failed: {exc}") from exc
    return PublicSuffixResponse(
        public_suffix=suffix.content,
        section=suffix.section,
        is_known=suffix.is_known,
    )
