"""HTML fragments shown by the UI: the live preview frame and the file pill."""
import html as html_lib
from typing import Optional

from services.attachment_service import Attachment

IFRAME_SANDBOX = "allow-scripts allow-forms allow-modals allow-popups allow-same-origin"

DOCUMENT_ICON = (
    '<svg xmlns="http://www.w3.org/2000/svg" fill="none" viewBox="0 0 24 24" stroke-width="1.5" '
    'stroke="currentColor" width="24" height="24"><path stroke-linecap="round" stroke-linejoin="round" '
    'd="M19.5 14.25v-2.625a3.375 3.375 0 0 0-3.375-3.375h-1.5A1.125 1.125 0 0 1 13.5 7.125v-1.5a3.375 '
    '3.375 0 0 0-3.375-3.375H8.25m2.25 0H5.625c-.621 0-1.125.504-1.125 1.125v17.25c0 .621.504 1.125 '
    '1.125 1.125h12.75c.621 0 1.125-.504 1.125-1.125V11.25a9 9 0 0 0-9-9Z" /></svg>'
)


def render_preview(generated_html: str, height: int = 720) -> str:
    """Wraps the generated document in a sandboxed iframe (same origin so localStorage works)."""
    srcdoc = html_lib.escape(generated_html, quote=True)
    return (
        f'<iframe class="vivify-preview" title="Preview" sandbox="{IFRAME_SANDBOX}" '
        f'style="width:100%;height:{height}px;border:0;border-radius:12px;background:#09090b;" '
        f'srcdoc="{srcdoc}"></iframe>'
    )


def render_placeholder() -> str:
    return (
        '<div class="vivify-empty">'
        '<div style="font-size:2rem;">✨</div>'
        '<p>Descreva o que você quer construir ou arraste um arquivo...</p>'
        '</div>'
    )


def render_file_pill(attachment: Optional[Attachment], thumbnail: Optional[str] = None) -> str:
    if attachment is None:
        return ""

    if thumbnail:
        icon = f'<img src="{thumbnail}" alt="preview" class="vivify-pill-thumb" />'
    else:
        icon = DOCUMENT_ICON

    name = html_lib.escape(attachment.name)
    return (
        '<div class="vivify-pill">'
        f'<div class="vivify-pill-icon">{icon}</div>'
        '<div class="vivify-pill-meta">'
        f'<span class="vivify-pill-name" title="{name}">{name}</span>'
        f'<span class="vivify-pill-size">{attachment.size_kb} KB</span>'
        '</div>'
        '</div>'
    )
