import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.middleware.cors import CORSMiddleware

from config import settings
from api.v1.router import api_router
from core.errors import (
    InvalidProfile,
    InvalidRequest,
    NutritionError,
    UnknownActivityLevel,
)

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
_LOG = logging.getLogger("dietdelish")

_ACTIVITY_FIELDS = {"activityLevel", "activity_level"}


app = FastAPI(title="DietDelish Nutrition API", version="1.0.0")

# CORS preflight for the storefront (origins come from CORS_ALLOW_ORIGINS)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allow_origins,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["Content-Type", "Authorization"],
)

app.include_router(api_router, prefix="/api/v1")


# ───────────────────────── error rendering ──────────────────
@app.exception_handler(NutritionError)
async def nutrition_error_handler(request: Request, exc: NutritionError) -> JSONResponse:
    _LOG.info("%s %s → %s: %s", request.method, request.url.path, exc.kind, exc.message)
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return await nutrition_error_handler(request, _classify(exc))


def _classify(exc: RequestValidationError) -> NutritionError:
    """Map pydantic errors onto the same kinds the calculator raises."""
    errors = exc.errors()
    message = "; ".join(
        f"{'.'.join(str(p) for p in e.get('loc', ()) if p != 'body')}: {e.get('msg', '')}"
        for e in errors
    )
    locs = [tuple(str(p) for p in e.get("loc", ())) for e in errors]
    if any("profile" in loc for loc in locs):
        if all(_ACTIVITY_FIELDS & set(loc) for loc in locs):
            return UnknownActivityLevel(message)
        return InvalidProfile(message)
    return InvalidRequest(message)


@app.get("/health", tags=["meta"])
def health() -> dict[str, str]:
    return {"status": "ok", "env": settings.env_name}


def run() -> None:
    """Serve the app with uvicorn (`dietdelish-api` / `python main.py`)."""
    import uvicorn

    uvicorn.run("main:app", host=settings.host, port=settings.port,
                log_level=settings.log_level.lower())


if __name__ == "__main__":  # pragma: no cover
    run()
