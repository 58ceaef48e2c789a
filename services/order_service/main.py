from fastapi import FastAPI
from shared.config.database import create_tables
from shared.notifications import register_notification_handlers
from shared.observability import setup_observability
from shared.security import limiter
from .router import router, admin_router, public_router
from .models import Order # Import to register with Base

order_app = FastAPI(title="Order Service", version="1.0.0")

# --- OBSERVABILITY BOOTSTRAP ---
setup_observability(order_app, "order_service")

# --- SECURITY SETUP ---
order_app.state.limiter = limiter
register_notification_handlers(order_app)

order_app.include_router(public_router)
order_app.include_router(router)
order_app.include_router(admin_router)

@order_app.on_event("startup")
async def startup_event():
    await create_tables()
