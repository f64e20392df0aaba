# PayTrack backend entrypoint: customer purchases, payment schedules and KPIs.

import logging
import sys

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from paytrack.app.api import admin_reports
from paytrack.app.api import admin_users
from paytrack.app.api import customers
from paytrack.app.api import kpi
from paytrack.app.api import login
from paytrack.app.api import payments
from paytrack.app.api import purchases
from paytrack.app.api import register
from paytrack.app.core.dev_seed import ensure_default_admin
from paytrack.app.core.settings import get_settings
from paytrack.app.db.base import Base
from paytrack.app.db.session import SessionLocal, engine

settings = get_settings()

logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[logging.StreamHandler(sys.stdout)],
)

logger = logging.getLogger(__name__)

app = FastAPI(title=settings.app_name, version=settings.api_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(register.router)
app.include_router(login.router)
app.include_router(customers.router)
app.include_router(purchases.router)
app.include_router(payments.router)
app.include_router(kpi.router)
app.include_router(admin_users.router)
app.include_router(admin_reports.router)


@app.get("/")
def read_root():
    return {"app": "PayTrack backend", "status": "ok"}


@app.get("/health")
def health_check():
    return {"status": "ok"}


@app.on_event("startup")
def prepare_database():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        ensure_default_admin(db)
    finally:
        db.close()
    logger.info("PayTrack started (environment=%s)", settings.environment)
