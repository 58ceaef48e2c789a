from fastapi import FastAPI

from shared.config.database import create_tables
from shared.notifications import register_notification_handlers
from shared.observability.setup import setup_observability

from .models import User, RevokedToken  # noqa: F401 (registers models with SQLAlchemy Base)
from .router import router, public_router

auth_app = FastAPI(
    title="Auth Service",
    version="1.0.0",
    description="Sign up, sign in, sign out and session role lookup.",
)

setup_observability(auth_app, "auth_service")
register_notification_handlers(auth_app)

auth_app.include_router(public_router)
auth_app.include_router(router)

@auth_app.on_event("startup")
async def startup_event() -> None:
    await create_tables()
