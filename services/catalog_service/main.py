from fastapi import FastAPI

from shared.config.database import create_tables
from shared.notifications import register_notification_handlers
from shared.observability import setup_observability
from .router import router, admin_router, public_router
from .models import Fruit  # noqa: F401 (registers model with SQLAlchemy Base)

catalog_app = FastAPI(
    title="Catalog Service",
    version="1.0.0"
)

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(catalog_app, "catalog_service")
register_notification_handlers(catalog_app)

catalog_app.include_router(public_router)
catalog_app.include_router(router)
catalog_app.include_router(admin_router)

@catalog_app.on_event("startup")
async def startup_event():
    await create_tables()
