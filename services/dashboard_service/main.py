from fastapi import FastAPI

from shared.config.database import create_tables
from shared.notifications import register_notification_handlers
from shared.observability import setup_observability
from .router import router, public_router

dashboard_app = FastAPI(title="Dashboard Service", version="1.0.0")

setup_observability(dashboard_app, "dashboard_service")
register_notification_handlers(dashboard_app)

dashboard_app.include_router(public_router)
dashboard_app.include_router(router)

@dashboard_app.on_event("startup")
async def startup_event():
    await create_tables()
