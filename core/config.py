from typing import List, Optional
from pydantic_settings import BaseSettings
from pydantic import Field


DEV_JWT_SECRET = "vbc-website-dev-secret-key"


class Settings(BaseSettings):
    # -------------------------------------------------
    # General
    # -------------------------------------------------
    PROJECT_NAME: str = "Victory Bible Church API"
    ENV: str = "development"

    # -------------------------------------------------
    # Frontend Domains
    # -------------------------------------------------
    FRONTEND_DOMAIN: Optional[str] = Field(None, env="FRONTEND_DOMAIN")

    FRONTEND_ORIGINS: List[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "https://victorybiblechurch.org",
        "https://www.victorybiblechurch.org",
    ]

    # -------------------------------------------------
    # CORS (auto-built below)
    # -------------------------------------------------
    BACKEND_CORS_ORIGINS: List[str] = []

    # -------------------------------------------------
    # Supabase (Primary DB)
    # -------------------------------------------------
    SUPABASE_URL: Optional[str] = Field(None, env="SUPABASE_URL")
    SUPABASE_ANON_KEY: Optional[str] = Field(None, env="SUPABASE_ANON_KEY")
    SUPABASE_SERVICE_ROLE_KEY: Optional[str] = Field(None, env="SUPABASE_SERVICE_ROLE_KEY")

    # -------------------------------------------------
    # JWT (admin sessions)
    # -------------------------------------------------
    JWT_SECRET_KEY: str = Field(DEV_JWT_SECRET, env="JWT_SECRET_KEY")
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRE_HOURS: int = 24

    # Local development only. Enables /api/auth/dev-login and dev-token-* bearers.
    DEV_AUTH_ENABLED: bool = Field(False, env="DEV_AUTH_ENABLED")

    # -------------------------------------------------
    # SMTP Email Notifications
    # -------------------------------------------------
    SMTP_HOST: Optional[str] = Field(None, env="SMTP_HOST")
    SMTP_PORT: Optional[int] = Field(None, env="SMTP_PORT")
    SMTP_USER: Optional[str] = Field(None, env="SMTP_USER")
    SMTP_PASS: Optional[str] = Field(None, env="SMTP_PASS")
    SMTP_TO: Optional[str] = Field(None, env="SMTP_TO")
    # true: implicit TLS (port 465); false: STARTTLS (port 587)
    SMTP_SECURE: bool = Field(True, env="SMTP_SECURE")

    EMAIL_FROM: str = "Victory Bible Church <no-reply@victorybiblechurch.org>"
    ADMIN_EMAIL: str = Field("admin@victorybiblechurch.org", env="ADMIN_EMAIL")

    # Church details used in email footers
    CHURCH_NAME: str = "Victory Bible Church Kitwe"
    CHURCH_ADDRESS: str = "123 Church Road, Kitwe, Zambia"
    CHURCH_PHONE: str = "+260 123 456 789"
    CHURCH_EMAIL: str = "info@victorybiblechurch.org"
    CHURCH_WEBSITE: str = "https://victorybiblechurch.org"
    CHURCH_LOGO_URL: str = "https://victorybiblechurch.org/logo.png"

    # -------------------------------------------------
    # Uploads (S3)
    # -------------------------------------------------
    AWS_ACCESS_KEY_ID: Optional[str] = Field(None, env="AWS_ACCESS_KEY_ID")
    AWS_SECRET_ACCESS_KEY: Optional[str] = Field(None, env="AWS_SECRET_ACCESS_KEY")
    AWS_BUCKET_NAME: Optional[str] = Field(None, env="AWS_BUCKET_NAME")
    AWS_REGION: str = Field("us-east-2", env="AWS_REGION")

    MAX_UPLOAD_BYTES: int = 5 * 1024 * 1024
    ALLOWED_UPLOAD_EXTENSIONS: List[str] = ["jpg", "jpeg", "png", "gif"]

    # -------------------------------------------------
    # Seeding
    # -------------------------------------------------
    SEED_ON_STARTUP: bool = Field(False, env="SEED_ON_STARTUP")
    SEED_ADMIN_PASSWORD: str = Field("admin123", env="SEED_ADMIN_PASSWORD")
    SEED_EDITOR_PASSWORD: str = Field("pastor123", env="SEED_EDITOR_PASSWORD")

    # -------------------------------------------------
    # Model Config
    # -------------------------------------------------
    class Config:
        case_sensitive = True

    @property
    def dev_auth_active(self) -> bool:
        """Dev shortcuts need both the explicit flag and a development ENV."""
        return self.DEV_AUTH_ENABLED and self.ENV == "development"


# Instantiate settings
settings = Settings()

# -------------------------------------------------
# Build CORS list dynamically after loading settings
# -------------------------------------------------
cors_origins = []

# 1) add deployed frontend domain
if settings.FRONTEND_DOMAIN:
    domain = settings.FRONTEND_DOMAIN
    if not domain.startswith("http"):
        domain = f"https://{domain}"
    cors_origins.append(domain.rstrip("/"))

# 2) add known church domains + local dev servers
cors_origins.extend([d.rstrip("/") for d in settings.FRONTEND_ORIGINS])

# 3) remove duplicates
settings.BACKEND_CORS_ORIGINS = sorted(list(set(cors_origins)))
