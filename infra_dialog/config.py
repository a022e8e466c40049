"""Sweeper configuration loaded from environment variables."""

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .logging_config import DEFAULT_FORMAT
from .surface import SYSTEM_PACKAGES


class Settings(BaseSettings):
    """Device and logging configuration."""

    model_config = SettingsConfigDict(case_sensitive=False)

    device_serial: str = ""
    # comma separated, kept as a string so the env value is not JSON-decoded
    system_packages: str = ",".join(SYSTEM_PACKAGES)
    log_level: str = "INFO"
    log_format: str = DEFAULT_FORMAT
    log_file: str | None = None
    log_json: bool = False
    log_max_bytes: int = 1048576
    log_backup_count: int = 3

    @field_validator("device_serial", mode="before")
    @classmethod
    def _strip(cls, v: object) -> object:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("system_packages")
    @classmethod
    def _require_packages(cls, v: str) -> str:
        if not [p for p in v.split(",") if p.strip()]:
            raise ValueError("system_packages must name at least one package")
        return v

    @property
    def packages(self) -> list[str]:
        return [p.strip() for p in self.system_packages.split(",") if p.strip()]


try:
    settings = Settings()
except ValidationError as exc:
    raise RuntimeError(f"Invalid infra-dialog configuration: {exc}") from exc
