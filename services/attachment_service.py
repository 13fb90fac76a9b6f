import base64
import io
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from PIL import Image, UnidentifiedImageError

from core.settings import settings

logger = logging.getLogger(__name__)

PDF_MIME = "application/pdf"


class AttachmentError(ValueError):
    """Raised when an uploaded file cannot be sent to the model."""


@dataclass
class Attachment:
    name: str
    mime_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def size_kb(self) -> str:
        return f"{self.size / 1024:.1f}"

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")

    @property
    def is_pdf(self) -> bool:
        return self.mime_type == PDF_MIME

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("utf-8")

    def to_data_url(self) -> str:
        return f"data:{self.mime_type};base64,{self.to_base64()}"


class AttachmentService:
    """
    Loads files dropped on the input area and turns them into inline
    attachments. Only images and PDFs are accepted.
    """

    def __init__(self, max_upload_mb: Optional[int] = None):
        self.max_bytes = (max_upload_mb or settings.MAX_UPLOAD_MB) * 1024 * 1024

    def load(self, path) -> Attachment:
        """
        Reads the file at `path` and validates type and size.

        Raises:
            AttachmentError: missing, empty, too large or unsupported file
        """
        file_path = Path(path)
        if not file_path.is_file():
            raise AttachmentError(f"File not found: {file_path.name}")

        mime_type = self.guess_mime_type(file_path)
        if not self.is_supported(mime_type):
            raise AttachmentError(
                f"Unsupported file type for {file_path.name}: {mime_type or 'unknown'}. "
                "Use an image or a PDF."
            )

        size = file_path.stat().st_size
        if size == 0:
            raise AttachmentError(f"File is empty: {file_path.name}")
        if size > self.max_bytes:
            raise AttachmentError(
                f"File too large: {file_path.name} ({size / 1024 / 1024:.1f} MB, "
                f"limit {self.max_bytes // (1024 * 1024)} MB)"
            )

        attachment = Attachment(
            name=file_path.name,
            mime_type=mime_type,
            data=file_path.read_bytes(),
        )
        logger.info(f"📎 Attachment loaded: {attachment.name} ({attachment.mime_type}, {attachment.size_kb} KB)")
        return attachment

    @staticmethod
    def guess_mime_type(file_path: Path) -> Optional[str]:
        """By extension first, then by sniffing the bytes for images."""
        mime_type, _ = mimetypes.guess_type(file_path.name)
        if mime_type:
            return mime_type

        try:
            with Image.open(file_path) as image:
                return image.get_format_mimetype()
        except (UnidentifiedImageError, OSError):
            return None

    @staticmethod
    def is_supported(mime_type: Optional[str]) -> bool:
        if not mime_type:
            return False
        return mime_type.startswith("image/") or mime_type == PDF_MIME

    def thumbnail_data_url(self, attachment: Attachment, size: int = 80) -> Optional[str]:
        """PNG preview for the file pill. None for PDFs or unreadable images."""
        if not attachment.is_image:
            return None

        try:
            with Image.open(io.BytesIO(attachment.data)) as image:
                image.thumbnail((size, size))
                buffer = io.BytesIO()
                image.convert("RGBA").save(buffer, format="PNG")
        except (UnidentifiedImageError, OSError) as e:
            logger.warning(f"Thumbnail failed for {attachment.name}: {e}")
            return None

        encoded = base64.b64encode(buffer.getvalue()).decode("utf-8")
        return f"data:image/png;base64,{encoded}"
