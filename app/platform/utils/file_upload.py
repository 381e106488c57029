from pathlib import Path
from typing import Optional

from fastapi import HTTPException, UploadFile, status
from pydantic import BaseModel

# Configuration
HTML_EXTENSIONS = {".html"}
SPECIFICATION_EXTENSIONS = {".txt", ".pdf"}
DESIGN_EXTENSIONS = {".png", ".jpg", ".jpeg", ".gif", ".bmp", ".svg"}


class UploadedFile(BaseModel):
    """An uploaded form file, read fully into memory."""
    filename: str
    content_type: Optional[str] = None
    data: bytes

    @property
    def extension(self) -> str:
        return Path(self.filename).suffix.lower()

    @property
    def size(self) -> int:
        return len(self.data)


async def read_upload(file: Optional[UploadFile]) -> Optional[UploadedFile]:
    """
    Read a multipart file part. Parts without a filename count as absent.
    """
    if file is None or not file.filename:
        return None
    contents = await file.read()
    return UploadedFile(filename=file.filename, content_type=file.content_type, data=contents)


def validate_upload_file(
    file: UploadedFile,
    *,
    label: str,
    allowed_extensions: set[str],
    max_size: int,
) -> None:
    """
    Validate uploaded file for extension and size.

    Raises:
        HTTPException: If validation fails
    """
    if file.extension not in allowed_extensions:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid {label} type. Allowed types: {', '.join(sorted(allowed_extensions))}",
        )

    if file.size > max_size:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"{label.capitalize()} too large. Maximum size is {max_size // (1024 * 1024)}MB",
        )
