"""Upload validation for new posts.

Images are kept inline as base64 data URLs; there is no upload service.
"""
import base64
from io import BytesIO

from PIL import Image, UnidentifiedImageError

from . import config
from .errors import ErrorKind, StoreError
from .logging_utils import get_logger

logger = get_logger("instaclone.media")


def validate_upload(data: bytes, content_type: str) -> None:
    """Raise StoreError(VALIDATION) unless ``data`` is an image under the size limit."""
    if not content_type or not content_type.startswith("image/"):
        raise StoreError(ErrorKind.VALIDATION, "Please select an image file")
    if len(data) > config.MAX_UPLOAD_BYTES:
        limit_mb = config.MAX_UPLOAD_BYTES / (1024 * 1024)
        raise StoreError(ErrorKind.VALIDATION, f"File size should be less than {limit_mb:g}MB")
    try:
        Image.open(BytesIO(data)).verify()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, SyntaxError, ValueError) as e:
        logger.debug("media: image verification failed: %s", e)
        raise StoreError(ErrorKind.VALIDATION, "Please select an image file") from e


def to_data_url(data: bytes, content_type: str) -> str:
    b64 = base64.b64encode(data).decode("ascii")
    return f"data:{content_type};base64,{b64}"


def load_upload(data: bytes, content_type: str) -> str:
    """Validate an upload and return it as a data URL usable as a post's media_url."""
    validate_upload(data, content_type)
    return to_data_url(data, content_type)
