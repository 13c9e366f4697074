"""
Todo API - Security Validation

Startup checks for the authentication configuration.
"""

import warnings

from todo_api.config import Settings, settings as default_settings
from todo_api.errors import ConfigurationError

MIN_PRODUCTION_SECRET_LENGTH = 32


def validate_security_config(settings: Settings = default_settings) -> None:
    """
    Validate security configuration on startup.

    A missing JWT secret is fatal. Weak settings in production only warn.
    """
    if not settings.JWT_SECRET:
        raise ConfigurationError(
            "JWT_SECRET is not set. Set the JWT_SECRET environment variable "
            "to the token signing secret."
        )

    if settings.is_production:
        # JWT secret strength (basic check)
        if len(settings.JWT_SECRET) < MIN_PRODUCTION_SECRET_LENGTH:
            warnings.warn(
                "SECURITY WARNING: JWT_SECRET is too short for production. "
                f"Use at least {MIN_PRODUCTION_SECRET_LENGTH} characters.",
                UserWarning,
            )

        # CORS validation
        if "*" in settings.CORS_ORIGINS:
            warnings.warn(
                "SECURITY WARNING: CORS wildcard (*) allows any origin. "
                "Set specific origins via CORS_ORIGINS.",
                UserWarning,
            )
