import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import orders_router
from config import settings

logger = logging.getLogger("order-desk")

app = FastAPI(title="Order Desk API")

allow_origins = settings.allowed_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=allow_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(orders_router)


@app.on_event("startup")
async def _on_startup() -> None:
    if allow_origins == ["*"]:
        logger.warning(
            "CORS is set to allow all origins with credentials; set ALLOWED_ORIGINS to explicit values for local dev."
        )
    if not settings.supabase_enabled:
        logger.warning("SUPABASE_URL/SUPABASE_SERVICE_ROLE_KEY not set; authenticated routes will return 503.")


@app.get("/api/diag/health")
async def health():
    return {"status": "ok"}

