from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware

from assets import router as assets_router
from audiences import router as audiences_router
from brand_intelligence import router as brand_intelligence_router
from brands import router as brands_router
from campaigns import router as campaigns_router
from competitor_analyses import router as competitor_analyses_router
from competitors import router as competitors_router
from core import db
from core.errors import install_exception_handlers
from core.logging_conf import configure_logging
from extraction import router as extraction_router
from inspirations import router as inspirations_router
from products_services import router as products_services_router

configure_logging()


@asynccontextmanager
async def lifespan(_: FastAPI):
    # Initialize the DB pool once per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="Brand Studio API", lifespan=lifespan)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type",
}


@app.middleware("http")
async def cors_headers(request: Request, call_next):
    # Bare OPTIONS requests (no Origin / Access-Control-Request-Method) get the
    # same 200 a preflight does, and every response carries the wildcard origin.
    if request.method == "OPTIONS":
        return Response(status_code=200, headers=CORS_HEADERS)
    response = await call_next(request)
    response.headers.setdefault("Access-Control-Allow-Origin", "*")
    return response


# Registered last so it wraps the middleware above and answers real preflights first.
# The SPA and the serverless-style clients call from any origin; no cookies are used.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

install_exception_handlers(app)

app.include_router(inspirations_router.router, tags=["ad-inspirations"])
app.include_router(extraction_router.router, tags=["extraction"])
app.include_router(brands_router.router, tags=["brands"])
app.include_router(assets_router.router, tags=["brand-assets"])
app.include_router(audiences_router.router, tags=["target-audiences"])
app.include_router(competitors_router.router, tags=["competitors"])
app.include_router(competitor_analyses_router.router, tags=["competitor-analyses"])
app.include_router(products_services_router.router, tags=["products-services"])
app.include_router(campaigns_router.router, tags=["campaigns"])
app.include_router(brand_intelligence_router.router, tags=["brand-intelligence"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}


@app.get("/")
def root() -> dict:
    return {"message": "brand-studio api"}
