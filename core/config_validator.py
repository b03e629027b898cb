# core/config_validator.py

from typing import List
from core.config import settings, DEV_JWT_SECRET
from core.logging_config import logger
from core.notifications import smtp_configured


DEFAULT_SEED_PASSWORDS = {"admin123", "pastor123"}


def validate_required_config() -> List[str]:
    """Names of settings the API cannot run without."""
    missing = [
        name for name in ("SUPABASE_URL", "SUPABASE_SERVICE_ROLE_KEY")
        if not getattr(settings, name)
    ]

    # Dev signing secret is only acceptable locally
    if settings.ENV != "development" and settings.JWT_SECRET_KEY == DEV_JWT_SECRET:
        missing.append("JWT_SECRET_KEY")

    return missing


def validate_optional_config() -> List[str]:
    """Human-readable warnings; none of these stop startup."""
    warnings = []

    if not smtp_configured():
        warnings.append("SMTP_HOST/SMTP_PORT/SMTP_USER/SMTP_PASS not set; emails will be skipped")
    if not settings.AWS_BUCKET_NAME:
        warnings.append("AWS_BUCKET_NAME not set; uploads disabled")
    if settings.DEV_AUTH_ENABLED and settings.ENV != "development":
        warnings.append("DEV_AUTH_ENABLED is ignored outside ENV=development")
    if settings.SEED_ON_STARTUP and {
        settings.SEED_ADMIN_PASSWORD, settings.SEED_EDITOR_PASSWORD
    } & DEFAULT_SEED_PASSWORDS:
        warnings.append("SEED_ON_STARTUP with a default seed password; set SEED_ADMIN_PASSWORD/SEED_EDITOR_PASSWORD")

    return warnings


def validate_config_on_startup(strict: bool = False):
    """
    Log configuration problems. With `strict` (production), missing
    required settings raise RuntimeError instead of only logging.
    """
    missing = validate_required_config()

    if missing:
        message = f"Missing required environment variables: {', '.join(missing)}"
        logger.error(message)
        if strict:
            raise RuntimeError(message)
    else:
        logger.info("Configuration validation passed")

    for warning in validate_optional_config():
        logger.warning(f"Config: {warning}")
