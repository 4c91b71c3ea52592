"""Static file serving for the PDF directory"""

import logging

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from config import Settings

logger = logging.getLogger(__name__)

class PDFStaticFiles(StaticFiles):
    """StaticFiles that tolerates a missing directory.

    Starlette refuses to serve anything once it finds its directory absent;
    here each request is resolved on its own, so a missing directory or file
    is a plain 404 and the directory may be created after startup.
    """

    def __init__(self, directory: str):
        super().__init__(directory=directory, html=False, check_dir=False)

    async def check_config(self) -> None:
        return None

def mount_pdf_files(app: FastAPI, config: Settings):
    """Serve every file in ``config.pdf_dir`` under ``config.files_prefix``"""
    path = config.files_prefix.rstrip("/")
    app.mount(path, PDFStaticFiles(config.pdf_dir), name="pdfs")
    logger.debug(f"Mounted {config.pdf_dir} at {path}")
