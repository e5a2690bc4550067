# marketplace_api/main.py
import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from . import config
from .admin import router as admin_router
from .balances import router as balances_router
from .contracts import router as contracts_router
from .db import dispose_engine, init_models
from .jobs import router as jobs_router
from .payments import router as payments_router
from .routers.health import router as health_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_models()
    yield
    await dispose_engine()


app = FastAPI(title="Marketplace API", version="1.0.0", lifespan=lifespan)


@app.get("/")
def root(): return {"name": "marketplace-api"}

# routers
app.include_router(health_router)
app.include_router(contracts_router)
app.include_router(jobs_router)
app.include_router(payments_router)
app.include_router(balances_router)
app.include_router(admin_router)


if __name__ == "__main__":
    import uvicorn
    logging.basicConfig(level=config.LOG_LEVEL)
    uvicorn.run("marketplace_api.main:app", host="0.0.0.0", port=config.PORT)
