from typing import Tuple
from urllib.parse import urlparse


def normalize_url(url: str) -> str:
    """Strip whitespace and default a missing scheme to https."""
    url = url.strip()
    if not urlparse(url).scheme:
        return f"https://{url}"
    return url


def validate_url(url: str) -> Tuple[bool, str, str]:
    """
    Returns:
        (is_valid, normalized_url, error_message)
    """
    if not url or not url.strip():
        return False, "", "URL cannot be empty"

    normalized_url = normalize_url(url)
    parsed = urlparse(normalized_url)

    if parsed.scheme not in ("http", "https"):
        return False, normalized_url, f"Invalid URL scheme: {parsed.scheme} (must be http or https)"

    if not parsed.netloc:
        return False, normalized_url, "Invalid URL format: missing domain"

    return True, normalized_url, ""
