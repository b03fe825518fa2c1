"""App startup point"""

import logging
from contextlib import asynccontextmanager

from asgi_correlation_id import CorrelationIdMiddleware
from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from getfavicon.configs.app_configs.config_logging import configure_logging
from getfavicon.configs.app_configs.config_sentry import configure_sentry
from getfavicon.favicon.factory import (
    create_cache_adapter,
    create_favicon_http_client,
    create_resolver,
)
from getfavicon.middleware import logging as mw_logging
from getfavicon.middleware import metrics
from getfavicon.utils.metrics import configure_metrics, get_metrics_client
from getfavicon.web import api, dockerflow

tags_metadata = [
    {
        "name": "favicon",
        "description": "Look up the favicon of a domain and return it as a data URI.",
    },
]

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Set up various configurations at startup and handle shutdown clean up.
    See lifespan events in fastAPI docs https://fastapi.tiangolo.com/advanced/events/
    """
    configure_logging()
    configure_sentry()
    await configure_metrics()

    # A single HTTP client is shared by all requests for the lifetime of the app.
    http_client = create_favicon_http_client()
    cache_adapter = create_cache_adapter()
    app.state.resolver = create_resolver(http_client, get_metrics_client(), cache_adapter)
    yield
    await http_client.aclose()
    await cache_adapter.close()
    await get_metrics_client().close()


app = FastAPI(openapi_tags=tags_metadata, lifespan=lifespan, default_response_class=ORJSONResponse)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> ORJSONResponse:
    """Use HTTP status code: 400 for all invalid requests."""
    logger.warning(f"HTTP 400: request validation error for path: {request.url.path}")
    return ORJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=jsonable_encoder({"detail": exc.errors()}),
    )


# Note: `LoggingMiddleware` should be added after `CorrelationIdMiddleware` so the
# request ID is available to the request summary.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["GET", "OPTIONS", "HEAD"],
)
app.add_middleware(metrics.MetricsMiddleware)
app.add_middleware(CorrelationIdMiddleware)
app.add_middleware(mw_logging.LoggingMiddleware)

app.include_router(dockerflow.router)
app.include_router(api.router)
