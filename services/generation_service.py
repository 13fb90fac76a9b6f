import logging
import re
import uuid
from datetime import datetime
from pathlib import Path
from typing import Optional

from langchain_core.messages import SystemMessage, HumanMessage

from core.llm_factory import create_default_llm
from core.settings import settings
from services.attachment_service import Attachment
from services.prompt_service import SYSTEM_INSTRUCTION, build_user_prompt

logger = logging.getLogger(__name__)

EMPTY_RESPONSE_PLACEHOLDER = "<!-- Falha ao gerar conteúdo -->"

_LEADING_HTML_FENCE = re.compile(r"\A```html\s*")
_LEADING_FENCE = re.compile(r"\A```\s*")
_TRAILING_FENCE = re.compile(r"```\Z")


class UIGenerator:
    """
    Brings a prompt and/or an image/PDF to life as a single-file HTML app.
    One model call per request; errors are logged and re-raised.
    """
    def __init__(self, llm=None):
        self.llm = llm or create_default_llm()

    def bring_to_life(self, prompt: str, file_base64: Optional[str] = None, mime_type: Optional[str] = None,
                      filename: Optional[str] = None) -> str:
        """
        Builds the multi-part message, calls the model and returns the
        generated HTML document.
        """
        prompt = prompt or ""
        parts = [{"type": "text", "text": build_user_prompt(prompt, bool(file_base64))}]

        if file_base64 and mime_type:
            parts.append(self._inline_part(file_base64, mime_type, filename))

        messages = [
            SystemMessage(content=SYSTEM_INSTRUCTION),
            HumanMessage(content=parts)
        ]

        logger.info(f"✨ Generating UI (prompt: {len(prompt)} chars, attachment: {mime_type if file_base64 else 'none'})")

        try:
            response = self.llm.invoke(messages)
        except Exception as e:
            logger.error(f"Generation failed: {e}")
            raise

        text = self._response_text(response) or EMPTY_RESPONSE_PLACEHOLDER
        return self._clean_output(text)

    def generate_from_attachment(self, prompt: str, attachment: Optional[Attachment] = None) -> str:
        if attachment is None:
            return self.bring_to_life(prompt)
        return self.bring_to_life(prompt, attachment.to_base64(), attachment.mime_type, attachment.name)

    def save_creation(self, html: str, output_dir: Optional[Path] = None) -> Path:
        """Writes the generated app to its own .html file and returns the path."""
        target_dir = Path(output_dir or settings.OUTPUT_DIR)
        target_dir.mkdir(parents=True, exist_ok=True)

        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        target_path = target_dir / f"creation_{stamp}_{uuid.uuid4().hex[:8]}.html"
        target_path.write_text(html, encoding="utf-8")

        logger.info(f"💾 Creation saved: {target_path}")
        return target_path

    @staticmethod
    def _inline_part(file_base64: str, mime_type: str, filename: Optional[str] = None) -> dict:
        if mime_type.startswith("image/"):
            return {
                "type": "image_url",
                "image_url": {"url": f"data:{mime_type};base64,{file_base64}"},
            }
        block = {
            "type": "file",
            "source_type": "base64",
            "mime_type": mime_type,
            "data": file_base64,
        }
        # OpenAI rejects file blocks without a filename
        if filename:
            block["filename"] = filename
        return block

    @staticmethod
    def _response_text(response) -> str:
        content = getattr(response, "content", response)
        if isinstance(content, str):
            return content
        # Multimodal models may answer with a list of content blocks
        chunks = []
        for block in content or []:
            if isinstance(block, str):
                chunks.append(block)
            elif isinstance(block, dict) and block.get("type") == "text":
                chunks.append(block.get("text", ""))
        return "".join(chunks)

    def _clean_output(self, text: str) -> str:
        text = _LEADING_HTML_FENCE.sub("", text, count=1)
        text = _LEADING_FENCE.sub("", text, count=1)
        text = _TRAILING_FENCE.sub("", text, count=1)
        return text
