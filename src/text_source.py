# src/text_source.py

"""
Input text sources: plain-text files and PDF uploads.
"""

import io
import os

from pypdf import PdfReader
from pypdf.errors import PyPdfError


class TextSourceError(Exception):
    """The uploaded file could not be turned into text."""


def extract_pdf_text(data: bytes) -> str:
    """
    Extract the text of every page of a PDF.

    Args:
        data: Raw PDF bytes.

    Returns:
        Page texts joined by newline, in page order.

    Raises:
        TextSourceError: the bytes are not a readable PDF.
    """
    try:
        reader = PdfReader(io.BytesIO(data))
        pages = [page.extract_text() or "" for page in reader.pages]
    except (PyPdfError, ValueError, OSError) as e:
        raise TextSourceError(f"Could not read PDF: {e}") from e
    print(f"    [PDF] {len(pages)} pages, {sum(len(p) for p in pages):,} chars")
    return "\n".join(pages)


def read_text_file(path: str) -> str:
    """
    Read a UTF-8 text file.

    Returns:
        File content stripped, or "" if the file is missing or unreadable.
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read().strip()
    except FileNotFoundError:
        print(f"Error: Text file not found: {path}")
        return ""
    except (OSError, UnicodeDecodeError) as e:
        print(f"Error reading text file: {e}")
        return ""


def load_source_text(filename: str, data: bytes) -> str:
    """Turn an uploaded file into text based on its extension."""
    ext = os.path.splitext(filename or "")[1].lower()
    if ext == ".pdf":
        return extract_pdf_text(data)
    return data.decode("utf-8", errors="replace")
