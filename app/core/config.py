# app/core/config.py

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_MAX_UPLOAD_BYTES = 50 * 1024 * 1024


def _env_str(environ: Mapping[str, str], name: str, default: Optional[str] = None) -> Optional[str]:
    value = environ.get(name)
    if value is None or value.strip() == "":
        return default
    return value.strip()


def _env_int(environ: Mapping[str, str], name: str, default: int) -> int:
    raw = _env_str(environ, name)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning(f"Invalid integer for {name}: {raw!r}, using default {default}")
        return default


def _env_float(environ: Mapping[str, str], name: str, default: float) -> float:
    raw = _env_str(environ, name)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        logger.warning(f"Invalid number for {name}: {raw!r}, using default {default}")
        return default


@dataclass(frozen=True)
class Settings:
    """Process-wide configuration, sourced from the environment."""

    # --- API Info ---
    API_TITLE: str = "PrintQuote API"
    API_DESCRIPTION: str = "3D print order backend: model uploads, price quotes and order capture."
    API_VERSION: str = "1.0.0"

    # --- Server Configuration ---
    HOST: str = "0.0.0.0"
    PORT: int = 5000

    # --- Database ---
    DATABASE_URL: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    DB_DATABASE: Optional[str] = None
    DB_PORT: int = 3306
    DB_POOL_SIZE: int = 10

    # --- Object storage ---
    AWS_ACCESS_KEY_ID: Optional[str] = None
    AWS_SECRET_ACCESS_KEY: Optional[str] = None
    AWS_REGION: Optional[str] = None
    S3_BUCKET: Optional[str] = None
    S3_ACL: str = "private"
    PRESIGN_EXPIRES: int = 60

    # --- Local uploads ---
    UPLOAD_DIR: Path = Path("uploads")
    MAX_UPLOAD_BYTES: int = DEFAULT_MAX_UPLOAD_BYTES

    # --- Pricing ---
    USD_TO_INR_RATE: float = 83.0

    @property
    def use_s3(self) -> bool:
        """Object storage is active only when all four credentials are present."""
        return all([
            self.AWS_ACCESS_KEY_ID,
            self.AWS_SECRET_ACCESS_KEY,
            self.AWS_REGION,
            self.S3_BUCKET,
        ])

    @property
    def upload_dir(self) -> Path:
        return self.UPLOAD_DIR.resolve()

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        return cls(
            HOST=_env_str(env, "HOST", "0.0.0.0"),
            PORT=_env_int(env, "PORT", 5000),
            DATABASE_URL=_env_str(env, "DATABASE_URL"),
            DB_HOST=_env_str(env, "DB_HOST"),
            DB_USER=_env_str(env, "DB_USER"),
            DB_PASSWORD=env.get("DB_PASSWORD"),
            DB_DATABASE=_env_str(env, "DB_DATABASE"),
            DB_PORT=_env_int(env, "DB_PORT", 3306),
            DB_POOL_SIZE=_env_int(env, "DB_POOL_SIZE", 10),
            AWS_ACCESS_KEY_ID=_env_str(env, "AWS_ACCESS_KEY_ID"),
            AWS_SECRET_ACCESS_KEY=_env_str(env, "AWS_SECRET_ACCESS_KEY"),
            AWS_REGION=_env_str(env, "AWS_REGION"),
            S3_BUCKET=_env_str(env, "S3_BUCKET"),
            S3_ACL=_env_str(env, "S3_ACL", "private"),
            PRESIGN_EXPIRES=_env_int(env, "PRESIGN_EXPIRES", 60),
            UPLOAD_DIR=Path(_env_str(env, "UPLOAD_DIR", "uploads")),
            MAX_UPLOAD_BYTES=_env_int(env, "MAX_UPLOAD_BYTES", DEFAULT_MAX_UPLOAD_BYTES),
            USD_TO_INR_RATE=_env_float(env, "USD_TO_INR_RATE", 83.0),
        )


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance."""
    global _settings
    if _settings is None:
        load_dotenv()
        _settings = Settings.from_env()
    return _settings
