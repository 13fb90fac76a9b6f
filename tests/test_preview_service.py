"""
Unit tests for preview rendering
"""

import sys
import html
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from services.attachment_service import Attachment
from services.preview_service import (
    render_preview,
    render_placeholder,
    render_file_pill,
    IFRAME_SANDBOX,
    DOCUMENT_ICON,
)


class TestRenderPreview:

    def test_wraps_in_sandboxed_iframe(self):
        """Scripts and localStorage must work inside the generated app"""
        result = render_preview("<!DOCTYPE html><h1>Oi</h1>")

        assert result.startswith("<iframe")
        assert f'sandbox="{IFRAME_SANDBOX}"' in result
        assert "allow-same-origin" in result

    def test_escapes_srcdoc(self):
        page = '<div class="x">"quoted" & more</div>'

        result = render_preview(page)

        assert "<div" not in result
        srcdoc = result.split('srcdoc="', 1)[1].rsplit('"></iframe>', 1)[0]
        assert html.unescape(srcdoc) == page

    def test_custom_height(self):
        assert "height:400px" in render_preview("<p></p>", height=400)


class TestFilePill:

    def test_no_attachment(self):
        assert render_file_pill(None) == ""

    def test_image_with_thumbnail(self):
        attachment = Attachment(name="sketch.png", mime_type="image/png", data=b"x" * 1536)

        result = render_file_pill(attachment, "data:image/png;base64,AAA")

        assert '<img src="data:image/png;base64,AAA"' in result
        assert "sketch.png" in result
        assert "1.5 KB" in result

    def test_pdf_uses_document_icon(self):
        attachment = Attachment(name="brief.pdf", mime_type="application/pdf", data=b"%PDF")

        result = render_file_pill(attachment)

        assert DOCUMENT_ICON in result
        assert "<img" not in result

    def test_name_is_escaped(self):
        attachment = Attachment(name="<b>.png", mime_type="image/png", data=b"x")

        assert "<b>.png" not in render_file_pill(attachment)


def test_placeholder():
    assert "arraste um arquivo" in render_placeholder()
