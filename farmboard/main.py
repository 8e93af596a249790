from __future__ import annotations

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from farmboard.api.routers.liquidity import router as liquidity_router
from farmboard.api.routers.network import router as network_router
from farmboard.api.routers.pools import router as pools_router
from farmboard.api.routers.transactions import router as transactions_router

app = FastAPI(title="Farmboard API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(pools_router)
app.include_router(liquidity_router)
app.include_router(transactions_router)
app.include_router(network_router)
