import os
from dotenv import load_dotenv

load_dotenv()

def _csv(name: str, default: str = "") -> list[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]

APP_NAME = os.getenv("APP_NAME", "Fresh Fruits")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
OTLP_ENDPOINT = os.getenv("OTLP_ENDPOINT", "")  # tracing is off when empty

CORS_ORIGINS = _csv("CORS_ORIGINS", "*")

# Emails listed here are given the admin role when they sign up
ADMIN_EMAILS = {email.lower() for email in _csv("ADMIN_EMAILS")}

ORDER_RATE_LIMIT = os.getenv("ORDER_RATE_LIMIT", "10/minute")

LOW_STOCK_THRESHOLD = int(os.getenv("LOW_STOCK_THRESHOLD", "10"))
MAX_ORDER_QUANTITY = int(os.getenv("MAX_ORDER_QUANTITY", "100"))

PAYMENT_BANK_NAME = os.getenv("PAYMENT_BANK_NAME", "BCA")
PAYMENT_ACCOUNT_NUMBER = os.getenv("PAYMENT_ACCOUNT_NUMBER", "1234567890")
PAYMENT_ACCOUNT_HOLDER = os.getenv("PAYMENT_ACCOUNT_HOLDER", "Fresh Fruits")
