import os

from dotenv import load_dotenv


load_dotenv()


def _get_list(value: str | None, default: str) -> list[str]:
    raw = value if value is not None else default
    return [item.strip() for item in raw.split(",") if item.strip()]

DATABASE_URL = os.getenv("DATABASE_URL", "")

ACCESS_TOKEN_SECRET = os.getenv("ACCESS_TOKEN_SECRET", "")
ACCESS_TOKEN_ALGORITHM = os.getenv("ACCESS_TOKEN_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRES_HOURS = int(os.getenv("ACCESS_TOKEN_EXPIRES_HOURS", "24"))

STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY", "")
PAYMENT_CURRENCY = os.getenv("PAYMENT_CURRENCY", "usd")

CORS_ALLOWED_ORIGINS = _get_list(os.getenv("CORS_ALLOWED_ORIGINS"), default="*")

PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

REQUIRED_SETTINGS = ("DATABASE_URL", "ACCESS_TOKEN_SECRET", "STRIPE_SECRET_KEY")


def validate_runtime_config() -> None:
    missing = [name for name in REQUIRED_SETTINGS if not globals()[name]]
    if missing:
        raise RuntimeError(f"Missing required configuration: {', '.join(missing)}.")
