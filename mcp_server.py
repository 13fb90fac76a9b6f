import sys
import logging
import traceback
from pathlib import Path
from typing import Optional

from mcp.server.fastmcp import FastMCP

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent))

from core.settings import settings
from core.logging_config import setup_logging

# --- 🛡️ PROTOCOL PROTECTION & LOGGING SETUP 🛡️ ---
# stdout carries the MCP protocol, logs go to stderr
setup_logging(settings.LOG_LEVEL, stream=sys.stderr)

from services.attachment_service import AttachmentService, AttachmentError
from services.generation_service import UIGenerator

# 1. Initialize MCP Server
mcp = FastMCP("Vivify", dependencies=["langchain-google-genai", "langchain-core"])

_generator: Optional[UIGenerator] = None


def get_generator() -> UIGenerator:
    """Created on first use so the server starts even without credentials."""
    global _generator
    if _generator is None:
        _generator = UIGenerator()
    return _generator


@mcp.tool()
def generate_ui(prompt: str = "", file_path: Optional[str] = None) -> str:
    """
    Turns a description and/or an image/PDF into a complete single-file
    HTML app (Tailwind, inline JS). Returns the HTML document.

    Args:
        prompt: What to build. May be empty when a file is given.
        file_path: Optional path to a wireframe, screenshot, photo or PDF.
    """
    try:
        attachment = AttachmentService().load(file_path) if file_path else None
        html = get_generator().generate_from_attachment(prompt, attachment)
        logging.info(f"✓ UI generated ({len(html)} chars)")
        return html
    except AttachmentError as e:
        logging.warning(f"⚠️ Attachment rejected: {e}")
        return f"❌ Invalid attachment: {e}"
    except Exception as e:
        logging.error(f"❌ Generation failed: {e}")
        traceback.print_exc(file=sys.stderr)
        return f"❌ Generation failed: {str(e)}"


@mcp.tool()
def save_ui(html: str) -> str:
    """
    Saves a generated HTML app to the output directory and returns its path.
    """
    try:
        path = get_generator().save_creation(html)
        return str(path)
    except Exception as e:
        logging.error(f"❌ Save failed: {e}")
        return f"❌ Save failed: {str(e)}"


def main():
    logging.info(f"🚀 Starting {settings.APP_NAME} MCP Server")
    logging.info(f"Provider: {settings.LLM_PROVIDER}")
    logging.info("Available tools: generate_ui(), save_ui()")

    try:
        mcp.run()
    except KeyboardInterrupt:
        logging.info("🛑 Server stopped manually.")
    except Exception as e:
        logging.critical(f"❌ Fatal server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
