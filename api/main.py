from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from auth import repository as auth_repository
from auth import router as auth_router
from core import settings
from core.log import configure_logging
from forecasts import repository as forecast_repository
from forecasts import router as forecasts_router
from forecasts import service as forecast_service
from products import repository as product_repository
from products import router as products_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Stores live for the whole process; seed forecasts once per startup.
    auth_repository.init_store()
    forecast_repository.init_store()
    product_repository.init_store()
    forecast_service.seed_forecasts(settings.seed_forecasts())
    try:
        yield
    finally:
        product_repository.close_store()
        forecast_repository.close_store()
        auth_repository.close_store()


app = FastAPI(
    title=settings.app_title(),
    description=(
        "CRUD API over in-memory resource stores. Forecast ids are list positions "
        "and shift on delete; product ids are stable."
    ),
    version="0.1.0",
    lifespan=lifespan,
)

# Allow local frontend dev server to call this API from the browser.
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router.router, tags=["auth"])
app.include_router(forecasts_router.router, tags=["forecasts"])
app.include_router(products_router.router, tags=["products"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "resource api", "docs": "/docs"}
