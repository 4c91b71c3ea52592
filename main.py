"""PDF Shelf: lists a directory of PDFs as JSON and serves the files themselves"""

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel
from typing import List, Dict, Any, Optional
import logging
from contextlib import asynccontextmanager

from config import Settings, settings, validate_settings
from pdf_service import PDFEntry, PDFDirectoryError, list_pdfs, pdf_directory_status
from serve_local_files import mount_pdf_files

import sys

# Logs go to stderr so they never mix with anything written to stdout
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    stream=sys.stderr
)
logger = logging.getLogger(__name__)

DIRECTORY_ERROR_MESSAGE = "failed to read pdf directory"

class HealthResponse(BaseModel):
    status: str
    message: str
    details: Optional[Dict[str, Any]] = None

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """Build the application around one PDF directory"""
    config = config or settings

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        try:
            validate_settings(config)
        except ValueError as e:
            logger.error(f"Invalid configuration: {e}")
            raise

        status = pdf_directory_status(config.pdf_dir)
        if not status["readable"]:
            logger.warning(f"PDF directory {status['pdf_dir']} is not readable yet")
        logger.info(f"Serving PDFs from {status['pdf_dir']} at {config.file_url_prefix}")

        yield

        logger.info("Shutting down PDF Shelf")

    app = FastAPI(
        title=config.app_name,
        description="Lists a directory of PDF files and serves their contents",
        version=config.app_version,
        lifespan=lifespan
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "HEAD", "OPTIONS"],
        allow_headers=["*"],
    )

    @app.exception_handler(PDFDirectoryError)
    async def directory_error_handler(request: Request, exc: PDFDirectoryError):
        logger.error(f"Failed to read PDF directory {exc.directory}: {exc.cause}")
        return PlainTextResponse(
            DIRECTORY_ERROR_MESSAGE,
            status_code=500,
            headers={"Access-Control-Allow-Origin": "*"}
        )

    @app.get(config.api_path, response_model=List[PDFEntry])
    def list_pdf_files(response: Response):
        """List the PDFs currently in the directory"""
        pdfs = list_pdfs(
            config.pdf_dir,
            url_prefix=config.file_url_prefix,
            sort_by_name=config.sort_by_name
        )
        response.headers["Access-Control-Allow-Origin"] = "*"
        return pdfs

    @app.get("/health", response_model=HealthResponse)
    def health_check():
        """Service status and PDF directory readability"""
        status = pdf_directory_status(config.pdf_dir)
        if status["readable"]:
            return HealthResponse(
                status="healthy",
                message=f"{config.app_name} v{config.app_version} is running",
                details=status
            )
        return HealthResponse(
            status="degraded",
            message="PDF directory is not readable",
            details=status
        )

    mount_pdf_files(app, config)

    return app

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=settings.host, port=settings.port)
