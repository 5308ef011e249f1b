from collections.abc import Mapping

from core.models.errors import ValidationError
from core.utils.constants import ERROR_CODE_UNSUPPORTED_MIME_TYPE

MAGIC_BYTES: Mapping[bytes, str] = {
    b"\xff\xd8\xff": "image/jpeg",
    b"\x89PNG\r\n\x1a\n": "image/png",
    b"GIF87a": "image/gif",
    b"GIF89a": "image/gif",
}


def detect_mime_type(file_data: bytes) -> str:
    for signature, mime in MAGIC_BYTES.items():
        if file_data.startswith(signature):
            return mime

    raise ValidationError(
        message="File type is not supported",
        error_code=ERROR_CODE_UNSUPPORTED_MIME_TYPE,
    )
