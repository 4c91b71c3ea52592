"""
Configuration settings for the PDF Shelf service
"""

from pydantic_settings import BaseSettings
from typing import List, Optional

class Settings(BaseSettings):
    # API Configuration
    app_name: str = "PDF Shelf"
    app_version: str = "1.0.0"
    debug: bool = False

    # PDF directory, resolved against the process working directory
    pdf_dir: str = "./pdfs"

    # Routes
    api_path: str = "/api/pdfs"
    files_prefix: str = "/pdfs"

    # Listing order: by file name, or raw directory order when False
    sort_by_name: bool = True

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"

    @property
    def file_url_prefix(self) -> str:
        """Prefix joined with a file name to build its download URL"""
        return self.files_prefix.rstrip("/") + "/"

    # Overrides come from PDFSHELF_* environment variables only, never a .env file
    class Config:
        env_prefix = "PDFSHELF_"
        case_sensitive = False

# Global settings instance
settings = Settings()

def validate_settings(config: Optional[Settings] = None):
    """Validate the route and listener settings"""
    config = config or settings
    errors: List[str] = []

    if not 0 < config.port < 65536:
        errors.append(f"PORT must be between 1 and 65535, got {config.port}")

    if not config.api_path.startswith("/"):
        errors.append("API_PATH must start with '/'")

    if not config.files_prefix.startswith("/") or config.files_prefix.rstrip("/") == "":
        errors.append("FILES_PREFIX must be a non-root path starting with '/'")

    elif config.api_path.rstrip("/") == config.files_prefix.rstrip("/") or \
            config.api_path.startswith(config.file_url_prefix):
        errors.append("API_PATH must not live under FILES_PREFIX")

    if not config.pdf_dir:
        errors.append("PDF_DIR is required")

    if errors:
        raise ValueError(f"Configuration errors: {', '.join(errors)}")

    return True
