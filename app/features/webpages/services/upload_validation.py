from typing import Optional

from fastapi import HTTPException, status

from app.features.webpages.schemas.webpage import UploadRequest
from app.platform.config import settings
from app.platform.utils.email import validate_email_param
from app.platform.utils.file_upload import (
    DESIGN_EXTENSIONS,
    HTML_EXTENSIONS,
    SPECIFICATION_EXTENSIONS,
    validate_upload_file,
)
from app.platform.utils.url_validator import validate_url


def _reject(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=detail)


def validate_upload_request(request: UploadRequest) -> Optional[str]:
    """
    Check the upload form shape in a fixed order, stopping at the first problem.
    Touches no store.

    Returns:
        The normalized URL, or None for an HTML file upload.

    Raises:
        HTTPException(400): with the reason for the first failed check
    """
    validate_email_param(request.email)

    if not request.name or not request.name.strip():
        raise _reject("Name is required")
    if len(request.name) > settings.MAX_NAME_LENGTH:
        raise _reject(f"Name must be at most {settings.MAX_NAME_LENGTH} characters")

    url = request.url if request.url and request.url.strip() else None
    normalized_url = None
    if url is not None:
        if len(url) > settings.MAX_URL_LENGTH:
            raise _reject(f"URL must be at most {settings.MAX_URL_LENGTH} characters")
        is_valid, normalized_url, error = validate_url(url)
        if not is_valid:
            raise _reject(error)

    if request.html_file is None and url is None:
        raise _reject("HTML or URL required")
    if request.html_file is not None and url is not None:
        raise _reject("Provide either an HTML file or a URL, not both")

    if request.html_file is not None:
        validate_upload_file(
            request.html_file,
            label="HTML file",
            allowed_extensions=HTML_EXTENSIONS,
            max_size=settings.MAX_HTML_FILE_SIZE,
        )

    if request.specification_file is not None:
        validate_upload_file(
            request.specification_file,
            label="specification file",
            allowed_extensions=SPECIFICATION_EXTENSIONS,
            max_size=settings.MAX_SPECIFICATION_FILE_SIZE,
        )

    if request.design_file is not None:
        validate_upload_file(
            request.design_file,
            label="design file",
            allowed_extensions=DESIGN_EXTENSIONS,
            max_size=settings.MAX_DESIGN_FILE_SIZE,
        )

    return normalized_url
