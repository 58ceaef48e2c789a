from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from shared.config.database import create_tables
from shared.config.settings import APP_NAME, CORS_ORIGINS
from shared.notifications import register_notification_handlers

# IMPORTANT: import models so they register with Base
from services.auth_service import models as auth_models
from services.catalog_service import models as catalog_models
from services.order_service import models as order_models

from services.auth_service.main import auth_app
from services.catalog_service.main import catalog_app
from services.order_service.main import order_app
from services.dashboard_service.main import dashboard_app

app = FastAPI(title=APP_NAME)
register_notification_handlers(app)

app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=CORS_ORIGINS != ["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mounted apps do not get lifespan events, so the cluster creates every table
@app.on_event("startup")
async def startup_event():
    await create_tables()

@app.get("/health")
async def health_check():
    return {"service": "cluster", "status": "running"}

app.mount("/auth", auth_app)
app.mount("/fruits", catalog_app)
app.mount("/orders", order_app)
app.mount("/dashboard", dashboard_app)
