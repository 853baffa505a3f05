import os
import logging
from pydantic import BaseModel, Field
from typing import List
from dotenv import load_dotenv

load_dotenv()

class Config(BaseModel):
    app_name: str = "Job Portal API"
    environment: str = os.getenv("APP_ENV", "development")
    api_prefix: str = os.getenv("API_PREFIX", "")
    port: int = int(os.getenv("PORT", "5000"))

    # Database
    database_url: str = os.getenv("DATABASE_URL", "sqlite:///./jobportal.db")

    # Session credential
    secret_key: str = os.getenv("JWT_SECRET", "dev-only-insecure-key-DO-NOT-USE-IN-PROD")
    jwt_algorithm: str = "HS256"
    token_expire_hours: int = 5
    cookie_name: str = "token"

    version: str = "1.0.0"
    request_id_header: str = "X-Request-ID"

    # CORS: comma-separated origins loaded from env.
    # Defaults cover the local Vite dev server and the hosted front end.
    cors_origins: List[str] = Field(
        default_factory=lambda: [
            o.strip()
            for o in os.getenv(
                "CORS_ORIGINS",
                "http://localhost:5173,"
                "https://jobs-portal-7538e.web.app,"
                "https://jobs-portal-7538e.firebaseapp.com",
            ).split(",")
            if o.strip()
        ]
    )

    rate_limit_per_minute: int = int(os.getenv("RATE_LIMIT_PER_MINUTE", "60"))

    @property
    def is_production(self) -> bool:
        return self.environment == "production"

settings = Config()

# --- Startup Validation for Production ---
_logger = logging.getLogger(__name__)
if settings.environment not in ("development", "testing"):
    if "dev-only" in settings.secret_key:
        raise RuntimeError(
            "FATAL: JWT_SECRET must be set for non-development environments. "
            "Set it as an environment variable."
        )
else:
    if "dev-only" in settings.secret_key:
        _logger.warning("⚠ Using insecure default JWT_SECRET; only acceptable in development.")
