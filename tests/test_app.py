"""
Tests for the Gradio event handlers (no server is launched)
"""

import sys
import io
from pathlib import Path

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

import pytest
from unittest.mock import MagicMock, patch
from PIL import Image

import app
from services.input_service import InputArea, LABEL_BUSY, LABEL_IDLE


@pytest.fixture
def area():
    return InputArea()


@pytest.fixture
def png_path(tmp_path):
    path = tmp_path / "sketch.png"
    buffer = io.BytesIO()
    Image.new("RGB", (64, 64), (200, 50, 50)).save(buffer, format="PNG")
    path.write_bytes(buffer.getvalue())
    return str(path)


@pytest.fixture
def mock_generator(tmp_path):
    generator = MagicMock()
    generator.generate_from_attachment.return_value = "<!DOCTYPE html><h1>App</h1>"
    generator.save_creation.return_value = tmp_path / "creation.html"
    with patch.object(app, "_generator", generator):
        yield generator


class TestPromptAndFile:

    def test_prompt_change_enables_button(self, area):
        area, button = app.on_prompt_change("Um jogo", area)

        assert area.prompt == "Um jogo"
        assert button["interactive"] is True

    def test_empty_prompt_keeps_button_disabled(self, area):
        _, button = app.on_prompt_change("", area)

        assert button["interactive"] is False

    def test_file_change_shows_pill(self, area, png_path):
        area, pill, _, button, hint = app.on_file_change(png_path, area)

        assert area.file_path == png_path
        assert "sketch.png" in pill
        assert "data:image/png;base64," in pill
        assert button["interactive"] is True
        assert "Arquivo anexado" in hint

    def test_rejected_file_is_cleared(self, area, tmp_path):
        path = tmp_path / "notes.txt"
        path.write_text("hi")

        with patch.object(app.gr, "Warning") as mock_warning:
            area, pill, file_update, button, _ = app.on_file_change(str(path), area)

        mock_warning.assert_called_once()
        assert area.file_path is None
        assert pill == ""
        assert file_update["value"] is None
        assert button["interactive"] is False

    def test_file_removed(self, area):
        area.attach("/tmp/x.png")

        area, pill, _, _, _ = app.on_file_change(None, area)

        assert area.file_path is None
        assert pill == ""


class TestGenerationFlow:

    def test_start_collects_and_resets(self, area):
        area.set_prompt("Um dashboard")

        area, request, prompt_update, file_update, pill, button, _ = app.start_generation("Um dashboard", None, area)

        assert request == {"prompt": "Um dashboard", "file_path": None}
        assert area.prompt == ""
        assert area.is_generating
        assert prompt_update["value"] == ""
        assert file_update["value"] is None
        assert pill == ""
        assert LABEL_BUSY in button["value"]
        assert button["interactive"] is False

    def test_start_with_nothing_submits_nothing(self, area):
        area, request, *_ = app.start_generation("", None, area)

        assert request is None
        assert not area.is_generating

    def test_start_uses_textbox_value_when_state_lags(self, area):
        """Enter pressed before the last prompt change reached the state"""
        area.set_prompt("Um jog")

        area, request, *_ = app.start_generation("Um jogo", None, area)

        assert request == {"prompt": "Um jogo", "file_path": None}
        assert area.is_generating

    def test_start_with_empty_state_but_typed_prompt(self, area):
        area, request, *_ = app.start_generation("x", None, area)

        assert request == {"prompt": "x", "file_path": None}

    def test_start_uses_current_file_value(self, area, png_path):
        area, request, *_ = app.start_generation("", png_path, area)

        assert request == {"prompt": "", "file_path": png_path}

    def test_start_drops_file_removed_from_component(self, area):
        area.attach("/tmp/old.png")

        area, request, *_ = app.start_generation("Um jogo", None, area)

        assert request == {"prompt": "Um jogo", "file_path": None}

    def test_run_renders_preview(self, mock_generator, tmp_path):
        preview, source, download = app.run_generation({"prompt": "Um jogo", "file_path": None})

        mock_generator.generate_from_attachment.assert_called_once_with("Um jogo", None)
        assert preview.startswith("<iframe")
        assert source == "<!DOCTYPE html><h1>App</h1>"
        assert download == str(tmp_path / "creation.html")

    def test_run_with_attachment(self, mock_generator, png_path):
        app.run_generation({"prompt": "", "file_path": png_path})

        attachment = mock_generator.generate_from_attachment.call_args[0][1]
        assert attachment.mime_type == "image/png"

    def test_run_failure_keeps_previous_output(self, mock_generator):
        mock_generator.generate_from_attachment.side_effect = RuntimeError("API down")

        with patch.object(app.gr, "Warning") as mock_warning:
            outputs = app.run_generation({"prompt": "Um jogo", "file_path": None})

        mock_warning.assert_called_once()
        mock_generator.save_creation.assert_not_called()
        assert all(out == app.gr.update() for out in outputs)

    def test_run_without_request(self, mock_generator):
        app.run_generation(None)

        mock_generator.generate_from_attachment.assert_not_called()

    def test_finish_unlocks(self, area):
        area.is_generating = True

        area, _, _, button = app.finish_generation(area)

        assert not area.is_generating
        assert LABEL_IDLE in button["value"]
