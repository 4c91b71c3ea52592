"""Directory listing service for the PDF shelf"""

import os
import stat
import logging
from datetime import datetime
from typing import List, Dict, Any
from urllib.parse import quote
from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

PDF_SUFFIX = ".pdf"

class PDFEntry(BaseModel):
    name: str = Field(..., alias="Name", description="Base file name including extension")
    size: int = Field(..., alias="Size", ge=0, description="File size in bytes")
    mod_time: datetime = Field(..., alias="ModTime", description="Last modification time")
    url: str = Field(..., alias="URL", description="Path the file's bytes are served from")

    model_config = ConfigDict(populate_by_name=True)

class PDFDirectoryError(Exception):
    """Raised when the PDF directory itself cannot be read"""

    def __init__(self, directory: str, cause: OSError):
        super().__init__(f"cannot read pdf directory {directory!r}: {cause}")
        self.directory = directory
        self.cause = cause

def _read_directory(directory: str) -> List[os.DirEntry]:
    try:
        with os.scandir(directory) as it:
            return list(it)
    except OSError as e:
        raise PDFDirectoryError(directory, e) from e

def _is_utf8(name: str) -> bool:
    # scandir smuggles undecodable bytes through as surrogate escapes
    try:
        os.fsencode(name).decode("utf-8")
    except UnicodeDecodeError:
        return False
    return True

def _build_entry(entry: os.DirEntry, url_prefix: str):
    """Stat a single candidate; None means skip it"""
    try:
        if entry.is_dir():
            return None
        if not entry.name.endswith(PDF_SUFFIX):
            return None
        if not _is_utf8(entry.name):
            logger.warning(f"Skipping {entry.name!r}: file name is not valid UTF-8")
            return None
        info = entry.stat()
    except OSError as e:
        logger.warning(f"Skipping {entry.name}: stat failed: {e}")
        return None

    if not stat.S_ISREG(info.st_mode):
        return None

    return PDFEntry(
        name=entry.name,
        size=info.st_size,
        mod_time=datetime.fromtimestamp(info.st_mtime).astimezone(),
        url=url_prefix + quote(entry.name),
    )

def list_pdfs(directory: str, url_prefix: str = "/pdfs/", sort_by_name: bool = True) -> List[PDFEntry]:
    """List every regular ``.pdf`` file directly inside ``directory``.

    Subdirectories are never listed, whatever their name, and the suffix
    match is case-sensitive. A file whose metadata cannot be read, or whose
    name is not valid UTF-8, is logged and skipped; only a failure to read
    the directory itself raises ``PDFDirectoryError``.

    Entries come back sorted by name unless ``sort_by_name`` is False, in
    which case the operating system's enumeration order is kept.
    """
    entries = _read_directory(directory)

    pdfs = []
    for entry in entries:
        pdf = _build_entry(entry, url_prefix)
        if pdf is not None:
            pdfs.append(pdf)

    if sort_by_name:
        pdfs.sort(key=lambda p: p.name)

    logger.debug(f"Listed {len(pdfs)} PDFs out of {len(entries)} entries in {directory}")
    return pdfs

def pdf_directory_status(directory: str) -> Dict[str, Any]:
    """Readability report for the health endpoint"""
    path = os.path.abspath(directory)
    exists = os.path.isdir(path)
    return {
        "pdf_dir": path,
        "exists": exists,
        "readable": exists and os.access(path, os.R_OK | os.X_OK),
    }
