from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core import config, db
from core.log import configure_logging
from countries import router as countries_router
from ports import router as ports_router
from reports import router as reports_router
from schema import router as schema_router
from shipping import router as shipping_router
from trade import router as trade_router


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    # One pool per process.
    await db.init_pool()
    try:
        yield
    finally:
        await db.close_pool()


app = FastAPI(title="PortObello", lifespan=lifespan)

# The browser UI is served from a separate origin during development.
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(schema_router.router, tags=["schema"])
app.include_router(countries_router.router, tags=["countries"])
app.include_router(ports_router.router, tags=["ports"])
app.include_router(trade_router.router, tags=["trade"])
app.include_router(shipping_router.router, tags=["shipping"])
app.include_router(reports_router.router, tags=["reports"])


@app.get("/health")
def health() -> dict:
    return {"status": "ok"}
