import os
from dataclasses import dataclass, asdict
from typing import Optional

from dotenv import find_dotenv, load_dotenv

from app.core.errors import ConfigError


def _env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class Settings:
    """Process configuration, read once at startup."""

    # ✅ Gemini
    gemini_api_key: str
    gemini_model: str = "gemini-2.5-flash"

    # ✅ Server
    host: str = "0.0.0.0"
    port: int = 3000
    frontend_base_uri: Optional[str] = None

    # ✅ Upload guards
    max_upload_bytes: int = 5 * 1024 * 1024
    min_resume_chars: int = 50

    # ✅ Logging / errors
    log_level: str = "INFO"
    log_dir: Optional[str] = "logs"
    expose_error_details: bool = True

    @classmethod
    def from_env(cls) -> "Settings":
        """
        Build settings from the environment (and a .env file if present).

        Raises:
            ConfigError: if GEMINI_API_KEY is missing or a numeric option is invalid
        """
        load_dotenv(find_dotenv(usecwd=True))

        api_key = (os.getenv("GEMINI_API_KEY") or "").strip()
        if not api_key:
            raise ConfigError("GEMINI_API_KEY is not set in .env")

        try:
            port = int(os.getenv("PORT", "3000"))
            max_upload_mb = float(os.getenv("MAX_UPLOAD_MB", "5"))
            min_chars = int(os.getenv("MIN_RESUME_CHARS", "50"))
        except ValueError as e:
            raise ConfigError(f"Invalid numeric configuration: {e}") from e

        return cls(
            gemini_api_key=api_key,
            gemini_model=os.getenv("GEMINI_MODEL", "gemini-2.5-flash"),
            host=os.getenv("HOST", "0.0.0.0"),
            port=port,
            frontend_base_uri=os.getenv("FRONTEND_BASE_URI") or None,
            max_upload_bytes=int(max_upload_mb * 1024 * 1024),
            min_resume_chars=min_chars,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_dir=os.getenv("LOG_DIR", "logs") or None,
            expose_error_details=_env_bool("EXPOSE_ERROR_DETAILS", True),
        )

    @property
    def cors_origins(self) -> list[str]:
        # No configured frontend means any origin may call the API
        if self.frontend_base_uri:
            return [self.frontend_base_uri]
        return ["*"]

    def as_dict(self) -> dict:
        return asdict(self)
