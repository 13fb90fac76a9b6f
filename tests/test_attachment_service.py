"""
Unit tests for Attachment Service

Tests for loading dropped files, type/size validation and thumbnails.
"""

import sys
import io
import base64
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from PIL import Image

from services.attachment_service import Attachment, AttachmentService, AttachmentError


def _png_bytes(size=(200, 100), color=(30, 120, 250)):
    buffer = io.BytesIO()
    Image.new("RGB", size, color).save(buffer, format="PNG")
    return buffer.getvalue()


@pytest.fixture
def service():
    return AttachmentService(max_upload_mb=1)


@pytest.fixture
def png_file(tmp_path):
    path = tmp_path / "wireframe.png"
    path.write_bytes(_png_bytes())
    return path


@pytest.fixture
def pdf_file(tmp_path):
    path = tmp_path / "brief.pdf"
    path.write_bytes(b"%PDF-1.4\n%fake\n")
    return path


class TestAttachment:

    def test_properties(self):
        attachment = Attachment(name="a.png", mime_type="image/png", data=b"x" * 2048)

        assert attachment.size == 2048
        assert attachment.size_kb == "2.0"
        assert attachment.is_image
        assert not attachment.is_pdf

    def test_pdf_flags(self):
        attachment = Attachment(name="a.pdf", mime_type="application/pdf", data=b"%PDF")

        assert attachment.is_pdf
        assert not attachment.is_image

    def test_base64_and_data_url(self):
        attachment = Attachment(name="a.png", mime_type="image/png", data=b"hello")

        assert attachment.to_base64() == "aGVsbG8="
        assert attachment.to_data_url() == "data:image/png;base64,aGVsbG8="


class TestLoad:

    def test_load_image(self, service, png_file):
        attachment = service.load(png_file)

        assert attachment.name == "wireframe.png"
        assert attachment.mime_type == "image/png"
        assert attachment.data == png_file.read_bytes()

    def test_load_pdf(self, service, pdf_file):
        attachment = service.load(str(pdf_file))

        assert attachment.mime_type == "application/pdf"

    def test_missing_file(self, service, tmp_path):
        with pytest.raises(AttachmentError, match="not found"):
            service.load(tmp_path / "nope.png")

    def test_unsupported_type(self, service, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hello")

        with pytest.raises(AttachmentError, match="Unsupported"):
            service.load(path)

    def test_unknown_extension(self, service, tmp_path):
        path = tmp_path / "blob"
        path.write_bytes(b"\x00\x01")

        with pytest.raises(AttachmentError, match="unknown"):
            service.load(path)

    def test_extensionless_image_detected_from_content(self, service, tmp_path):
        """Dropped files may arrive without an extension"""
        path = tmp_path / "clipboard"
        path.write_bytes(_png_bytes())

        attachment = service.load(path)

        assert attachment.mime_type == "image/png"
        assert attachment.is_image

    def test_extension_wins_over_content(self, tmp_path):
        path = tmp_path / "photo.jpg"
        path.write_bytes(_png_bytes())

        assert AttachmentService.guess_mime_type(path) == "image/jpeg"

    def test_empty_file(self, service, tmp_path):
        path = tmp_path / "empty.png"
        path.write_bytes(b"")

        with pytest.raises(AttachmentError, match="empty"):
            service.load(path)

    def test_too_large(self, service, tmp_path):
        path = tmp_path / "huge.pdf"
        path.write_bytes(b"0" * (1024 * 1024 + 1))

        with pytest.raises(AttachmentError, match="too large"):
            service.load(path)

    def test_attachment_error_is_value_error(self):
        assert issubclass(AttachmentError, ValueError)


class TestSupportedTypes:

    @pytest.mark.parametrize("mime", ["image/png", "image/jpeg", "image/webp", "application/pdf"])
    def test_supported(self, mime):
        assert AttachmentService.is_supported(mime)

    @pytest.mark.parametrize("mime", [None, "", "text/plain", "application/zip", "video/mp4"])
    def test_unsupported(self, mime):
        assert not AttachmentService.is_supported(mime)


class TestThumbnail:

    def test_image_thumbnail(self, service, png_file):
        attachment = service.load(png_file)

        data_url = service.thumbnail_data_url(attachment, size=40)

        assert data_url.startswith("data:image/png;base64,")
        raw = base64.b64decode(data_url.split(",", 1)[1])
        with Image.open(io.BytesIO(raw)) as thumb:
            assert max(thumb.size) <= 40

    def test_pdf_has_no_thumbnail(self, service, pdf_file):
        assert service.thumbnail_data_url(service.load(pdf_file)) is None

    def test_corrupt_image_has_no_thumbnail(self, service):
        attachment = Attachment(name="broken.png", mime_type="image/png", data=b"not an image")

        assert service.thumbnail_data_url(attachment) is None
