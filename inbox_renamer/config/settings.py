from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"
    log_file: Path | None = None

    watch_folder: Path | None = None
    review_folder_name: str = "Review"
    document_extension: str = "pdf"
    max_filename_length: int = Field(default=70, gt=10)

    pdf_engine: str = "pdfplumber"

    ocr_languages: list[str] = Field(default_factory=lambda: ["deu", "eng"])
    ocr_render_scale: float = Field(default=1.0, gt=0)
    tesseract_cmd: str | None = None

    max_workers: int = Field(default=4, ge=1)
    event_channel_size: int = Field(default=256, ge=1)
    event_latency_seconds: float = Field(default=0.5, ge=0)
