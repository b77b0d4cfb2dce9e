import logging
import os
import time
import traceback

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware

from academix_api.errors import ResourceNotFoundError
from academix_api.logging_config import configure_logging
from academix_api.routers.categories import router as categories_router
from academix_api.routers.items import router as items_router
from academix_api.routers.languages import router as languages_router
from academix_api.routers.sub_categories import router as sub_categories_router

configure_logging(
    service_name=os.getenv("LOG_SERVICE_NAME", "api"),
)

app = FastAPI(title="Academix Catalog API")
logger = logging.getLogger(__name__)


def _request_fields(request: Request, start: float) -> dict:
    return {
        "method": request.method,
        "path": request.url.path,
        "client": request.client.host if request.client else None,
        "duration_ms": int((time.perf_counter() - start) * 1000),
    }


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """One log line per catalog request; failures carry the traceback."""

    async def dispatch(self, request: Request, call_next):  # type: ignore[override]
        start = time.perf_counter()
        try:
            response = await call_next(request)
        except Exception as exc:  # noqa: BLE001 - logged and re-raised
            logger.error(
                "Catalog request failed",
                extra={
                    **_request_fields(request, start),
                    "exception_type": type(exc).__name__,
                    "exception_message": str(exc),
                    "traceback": traceback.format_exc(),
                },
            )
            raise
        fields = {**_request_fields(request, start), "status_code": response.status_code}
        if response.status_code >= 500:
            logger.error("Catalog request errored", extra=fields)
        elif request.method != "GET":
            logger.info("Catalog change handled", extra=fields)
        else:
            logger.debug("Catalog request served", extra=fields)
        return response


app.add_middleware(RequestLoggingMiddleware)


@app.exception_handler(ResourceNotFoundError)
async def resource_not_found_handler(request: Request, exc: ResourceNotFoundError) -> JSONResponse:
    logger.warning("Resource not found", extra={"method": request.method, "path": request.url.path})
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": exc.message})


@app.get("/health")
def healthcheck() -> dict:
    return {"status": "ok"}


app.include_router(languages_router)
app.include_router(categories_router)
app.include_router(sub_categories_router)
app.include_router(items_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("academix_api.main:app", host="0.0.0.0", port=8000, log_config=None)
