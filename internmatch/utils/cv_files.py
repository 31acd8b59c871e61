"""
CV File Utility - validate and decode CVs submitted with intern profiles.

CVs arrive as base64 text inside the profile JSON and are served back
to organizations as raw bytes.

Supported formats:
- PDF (.pdf)
- Word (.doc, .docx)

Max file size: 5MB (max_cv_size_mb)
"""

import base64
import binascii
from urllib.parse import quote

from internmatch.core.config import get_settings

ALLOWED_EXTENSIONS = {'.pdf', '.doc', '.docx'}
DEFAULT_CV_FILENAME = "cv.pdf"

CONTENT_TYPES = {
    '.pdf': "application/pdf",
    '.doc': "application/msword",
    '.docx': "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}


def get_file_extension(filename: str) -> str:
    """Get lowercase file extension."""
    if '.' not in filename:
        return ''
    return '.' + filename.rsplit('.', 1)[1].lower()


def is_allowed_cv_filename(filename: str) -> bool:
    return get_file_extension(filename) in ALLOWED_EXTENSIONS


def cv_content_type(filename: str) -> str:
    """Content-Type for a stored CV. Anything unrecognised is served as PDF."""
    return CONTENT_TYPES.get(get_file_extension(filename), CONTENT_TYPES['.pdf'])


def _strip_data_url(encoded: str) -> str:
    # Browsers' FileReader.readAsDataURL prefixes "data:<mime>;base64,"
    if encoded.startswith("data:") and "," in encoded:
        encoded = encoded.split(",", 1)[1]
    # MIME encoders wrap lines at 76 characters
    return "".join(encoded.split())


def decode_cv(encoded: str) -> bytes:
    """
    Decode a base64 CV payload.

    Raises:
        ValueError if the payload is not base64, is empty, or exceeds
        the configured size limit.
    """
    max_mb = get_settings().max_cv_size_mb
    try:
        content = base64.b64decode(_strip_data_url(encoded), validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("CV must be base64 encoded")

    if not content:
        raise ValueError("CV file is empty")
    if len(content) > max_mb * 1024 * 1024:
        raise ValueError(f"CV too large. Maximum size: {max_mb}MB")
    return content


def normalize_cv_base64(encoded: str) -> str:
    """Validate a CV payload and return it as bare, unwrapped base64."""
    decode_cv(encoded)
    return _strip_data_url(encoded)


def read_cv(encoded: str) -> bytes:
    """Raw bytes of a stored CV (already validated on submission)."""
    return base64.b64decode(_strip_data_url(encoded))


def has_control_chars(filename: str) -> bool:
    return any(ord(ch) < 32 or ord(ch) == 127 for ch in filename)


def content_disposition(filename: str) -> str:
    """
    Content-Disposition value for serving a CV inline.

    Plain ASCII names go out as filename="...". Anything else gets an
    ASCII fallback plus the RFC 6266 filename* form. Header values
    must encode as latin-1.
    """
    if filename.isascii() and not has_control_chars(filename) and not any(c in filename for c in '"\\'):
        return f'inline; filename="{filename}"'
    fallback = "cv" + (get_file_extension(filename) or ".pdf")
    return f"inline; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"
