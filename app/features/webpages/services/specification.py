import asyncio
import io
from pathlib import Path

from pypdf import PdfReader


class SpecificationExtractionError(Exception):
    pass


def extract_specification_text(filename: str, data: bytes) -> str:
    """
    Plain read for .txt, page-by-page text extraction for .pdf.

    Raises:
        SpecificationExtractionError: if the PDF cannot be parsed
    """
    if Path(filename).suffix.lower() == ".pdf":
        try:
            reader = PdfReader(io.BytesIO(data))
            pages = [(page.extract_text() or "") for page in reader.pages]
        except Exception as e:
            raise SpecificationExtractionError(f"Could not read PDF {filename}: {e}") from e
        return "\n".join(pages).strip()

    return data.decode("utf-8", errors="replace")


async def extract_specification_text_async(filename: str, data: bytes) -> str:
    # PDF parsing is CPU bound
    return await asyncio.to_thread(extract_specification_text, filename, data)
