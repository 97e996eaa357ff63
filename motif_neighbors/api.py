"""
HTTP boundary: FastAPI routes over a QueryService.

Routes keep the paths and parameters of the map front end:
  GET /motifQuery?code=...&num=...
  GET /traditionQuery?code=...&num=...
  GET /fetchTraditionDict
  GET /fetchMotifDistr?code=...
  GET /fetchMotifList
  GET /compareTraditions?trad1=...&trad2=...

Run with:
  uvicorn motif_neighbors.api:create_app --factory --port 8080
"""

import logging
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, Query, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import VERSION, Settings, load_settings
from .dataset import Dataset, load_dataset
from .errors import DimensionMismatchError, InvalidCountError, NotFoundError
from .ranker import ALL
from .schemas import (
    HealthResponse,
    MotifNeighborResponse,
    NeighborResponse,
    TraditionPointResponse,
)
from .service import QueryService

logger = logging.getLogger(__name__)


def _register_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(NotFoundError)
    async def not_found(request: Request, exc: NotFoundError):
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(InvalidCountError)
    async def invalid_count(request: Request, exc: InvalidCountError):
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    @app.exception_handler(RequestValidationError)
    async def bad_request(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={"detail": "Bad Request"})

    @app.exception_handler(DimensionMismatchError)
    async def data_integrity(request: Request, exc: DimensionMismatchError):
        # Corrupt data fails this query only; the process keeps serving.
        logger.error("Data integrity error on %s: %s", request.url.path, exc)
        return JSONResponse(
            status_code=500, content={"detail": "Internal Server Error"}
        )


def create_app(
    dataset: Optional[Dataset] = None, settings: Optional[Settings] = None
) -> FastAPI:
    """Build the application. Loads the dataset from settings if not given."""
    if settings is None:
        settings = load_settings()
    if dataset is None:
        dataset = load_dataset(settings.data_dir)
    service = QueryService(dataset, precision=settings.distance_precision)

    app = FastAPI(title="Motif Neighbors API", version=VERSION)
    app.state.service = service
    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["GET"],
        allow_headers=["*"],
    )

    if "*" in settings.cors_origins:
        @app.middleware("http")
        async def allow_any_origin(request: Request, call_next):
            # CORSMiddleware only answers requests that send an Origin header
            response = await call_next(request)
            response.headers.setdefault("Access-Control-Allow-Origin", "*")
            return response

    _register_error_handlers(app)

    @app.get("/health", response_model=HealthResponse)
    def health():
        return HealthResponse(
            status="healthy",
            version=VERSION,
            traditions=len(dataset.traditions),
            motifs=len(dataset.motifs),
        )

    @app.get("/motifQuery", response_model=List[MotifNeighborResponse])
    def motif_query(code: str = Query(...), num: int = Query(ALL)):
        return service.motif_query(code, num)

    @app.get("/traditionQuery", response_model=List[NeighborResponse])
    def tradition_query(code: str = Query(...), num: int = Query(ALL)):
        return service.tradition_query(code, num)

    @app.get(
        "/fetchTraditionDict",
        response_model=List[TraditionPointResponse],
        response_model_by_alias=True,
    )
    def fetch_tradition_dict():
        return service.tradition_points()

    @app.get(
        "/fetchMotifDistr",
        response_model=List[TraditionPointResponse],
        response_model_by_alias=True,
    )
    def fetch_motif_distr(code: str = Query(...)):
        return service.motif_distribution(code)

    @app.get("/fetchMotifList")
    def fetch_motif_list() -> List[List[Any]]:
        return service.motif_list()

    @app.get("/compareTraditions")
    def compare_traditions(
        trad1: str = Query(...), trad2: str = Query(...)
    ) -> Dict[str, List[str]]:
        result = service.compare_traditions(trad1, trad2)
        # Keyed by tradition code, as the front end expects. When trad1 ==
        # trad2 (or a code is "common") the later key wins; for trad1 ==
        # trad2 both unique lists are empty, so nothing is lost.
        return {
            "common": list(result.common),
            trad1: list(result.only_a),
            trad2: list(result.only_b),
        }

    @app.get("/{path:path}", include_in_schema=False)
    def unknown(path: str):
        return JSONResponse(status_code=400, content={"detail": f"Bad request: {path}"})

    logger.info("API ready: %s", service.stats())
    return app
