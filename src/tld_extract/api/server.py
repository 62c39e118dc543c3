"""
FastAPI server for hostname parsing.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import JSONResponse

from tld_extract.api.loader import get_extractor, init_extractor, is_initialized
from tld_extract.api.models import RefreshResponse, RuleSetStats, TLDResponse
from tld_extract.config import get_config
from tld_extract.errors import FormatError, PSLFetchError
from tld_extract.sources import SnapshotStore

# Configure logging
logging.basicConfig(
    level=get_config().log_level.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Lifespan context manager for the FastAPI app.

    Builds the extractor from config on startup unless one is installed.
    """
    if not is_initialized():
        logger.info("Starting up: loading Public Suffix List...")
        init_extractor(config=get_config())
        logger.info("Public Suffix List loaded successfully")

    yield

    logger.info("Shutting down...")


# Create FastAPI app
app = FastAPI(
    title="TLD Extract API",
    description="Hostname → root domain / TLD / subdomain via the Public Suffix List",
    version="0.1.0",
    lifespan=lifespan,
)


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "TLD Extract API is running"}


@app.get("/v1/parse", response_model=TLDResponse)
async def parse_input(
    input: str = Query(..., min_length=1, description="URL or hostname to parse"),
    quick: bool = Query(False, description="Only apply normal rules"),
) -> TLDResponse:
    """
    Split a URL or hostname into its domain parts.

    Raises:
        404: If no host could be extracted or no rule matches
    """
    result = get_extractor().parse(input, quick=quick)
    if result is None:
        logger.info(f"No public suffix match for {input!r}")
        raise HTTPException(status_code=404, detail=f"No public suffix match: {input}")
    return TLDResponse.from_result(input, result)


@app.get("/v1/psl", response_model=RuleSetStats)
async def psl_stats() -> RuleSetStats:
    """Rule counts of the active rule set."""
    return RuleSetStats.from_rule_set(get_extractor().rule_set)


@app.post("/v1/psl/refresh", response_model=RefreshResponse)
def refresh_psl() -> RefreshResponse:
    """
    Fetch the latest Public Suffix List and activate it.

    Raises:
        502: If the download fails or the data cannot be decoded
    """
    extractor = get_extractor()
    psl = get_config().psl
    store = SnapshotStore(psl.cache_dir, compression_level=psl.compression_level)

    try:
        rule_set = extractor.fetch_latest_psl(store=store)
    except (PSLFetchError, FormatError) as e:
        logger.warning(f"PSL refresh failed: {e}")
        raise HTTPException(status_code=502, detail=str(e))

    return RefreshResponse(
        source_url=extractor.source_url, rules=RuleSetStats.from_rule_set(rule_set)
    )


@app.exception_handler(404)
async def not_found_handler(request, exc):
    """Custom 404 handler."""
    return JSONResponse(status_code=404, content={"detail": str(exc.detail)})


def main():
    """Run the server (for development)."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        app,
        host=config.api.host,
        port=config.api.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
