import gradio as gr
import logging
import sys
from pathlib import Path

# --- SETUP PATHS ---
sys.path.insert(0, str(Path(__file__).parent))

# --- IMPORTS ---
from core.settings import settings
from core.logging_config import setup_logging
from services.attachment_service import AttachmentService, AttachmentError
from services.generation_service import UIGenerator
from services.input_service import InputArea, HINT_EMPTY, LABEL_IDLE
from services.preview_service import render_preview, render_placeholder, render_file_pill

# --- LOGGING SETUP ---
setup_logging(settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

attachment_service = AttachmentService()


def _init_generator():
    """The UI stays up without credentials, only with the input disabled."""
    try:
        return UIGenerator()
    except (RuntimeError, ValueError) as e:
        logger.error(f"❌ Generator unavailable: {e}")
        return None


_generator = _init_generator()
INPUT_DISABLED = _generator is None


# --- HELPER FUNCTIONS ---
def button_update(area: InputArea):
    icon = "⏳" if area.is_generating else "✨"
    label = f"{icon} {area.button_label}"
    return gr.update(value=label, interactive=area.can_submit)


def hint_text(area: InputArea) -> str:
    return f"`{area.hint}`"


def on_prompt_change(prompt: str, area: InputArea):
    area.set_prompt(prompt)
    return area, button_update(area)


def on_file_change(file_path, area: InputArea):
    """Picked or dropped file: validate it and show the preview pill."""
    if not file_path:
        area.remove_file()
        return area, "", gr.update(), button_update(area), hint_text(area)

    try:
        attachment = attachment_service.load(file_path)
    except AttachmentError as e:
        logger.warning(f"⚠️ Attachment rejected: {e}")
        gr.Warning(str(e))
        area.remove_file()
        return area, "", gr.update(value=None), button_update(area), hint_text(area)

    area.attach(file_path)
    thumbnail = attachment_service.thumbnail_data_url(attachment)
    return area, render_file_pill(attachment, thumbnail), gr.update(), button_update(area), hint_text(area)


def start_generation(prompt: str, file_path, area: InputArea):
    """
    Collects prompt/file, clears the input area and locks it.
    When nothing can be submitted the request stays empty and inputs are untouched.
    """
    # Component values are current; the state may still lag behind a queued .change
    area.set_prompt(prompt)
    if file_path:
        area.attach(file_path)
    else:
        area.remove_file()

    request = {}
    submitted = area.submit(lambda prompt, file_path: request.update(prompt=prompt, file_path=file_path))

    if not submitted:
        return area, None, gr.update(), gr.update(), gr.update(), button_update(area), hint_text(area)

    area.is_generating = True
    return (
        area,
        request,
        gr.update(value="", interactive=False),
        gr.update(value=None, interactive=False),
        "",
        button_update(area),
        f"`{HINT_EMPTY}`",
    )


def run_generation(request):
    """Single model call. On failure the previous preview stays visible."""
    if not request:
        return gr.update(), gr.update(), gr.update()

    try:
        attachment = None
        if request.get("file_path"):
            attachment = attachment_service.load(request["file_path"])

        generated = _generator.generate_from_attachment(request.get("prompt", ""), attachment)
        saved_path = _generator.save_creation(generated)
    except AttachmentError as e:
        gr.Warning(str(e))
        return gr.update(), gr.update(), gr.update()
    except Exception as e:
        logger.error(f"UI generation error: {e}")
        gr.Warning(f"Falha ao gerar: {str(e)[:200]}")
        return gr.update(), gr.update(), gr.update()

    return render_preview(generated), generated, str(saved_path)


def finish_generation(area: InputArea):
    area.is_generating = False
    return (
        area,
        gr.update(interactive=not INPUT_DISABLED),
        gr.update(interactive=not INPUT_DISABLED),
        button_update(area),
    )


# --- GRADIO INTERFACE ---
with gr.Blocks(
    title=f"{settings.APP_NAME} - Generative UI",
    fill_height=True
) as demo:

    area_state = gr.State(InputArea(disabled=INPUT_DISABLED))
    request_state = gr.State(None)

    # HEADER
    gr.HTML(f"""
        <div class="main-header">
            <h1>{settings.APP_NAME}</h1>
            <p>Descreva um app, envie um esboço, um print ou a foto de um objeto real, e veja ele ganhar vida.</p>
        </div>
        """)

    if INPUT_DISABLED:
        gr.HTML('<div class="info-card warning">⚠️ Nenhum provedor de IA configurado. Defina GEMINI_API_KEY no arquivo .env e reinicie.</div>')

    # INPUT AREA
    with gr.Column(elem_classes=["input-area"]):
        prompt_box = gr.Textbox(
            placeholder="Descreva o que você quer construir ou arraste um arquivo...",
            show_label=False,
            lines=2,
            max_lines=8,
            interactive=not INPUT_DISABLED,
            elem_classes=["prompt-box"],
        )
        file_input = gr.File(
            label="Imagem ou PDF",
            file_types=["image", ".pdf"],
            type="filepath",
            interactive=not INPUT_DISABLED,
            height=120,
        )
        file_pill = gr.HTML("")
        with gr.Row(elem_classes=["toolbar"]):
            hint = gr.Markdown(f"`{HINT_EMPTY}`")
            generate_btn = gr.Button(
                f"✨ {LABEL_IDLE}",
                variant="primary",
                interactive=False,
                elem_classes=["primary-button"],
            )

    # OUTPUT
    with gr.Tabs():
        with gr.Tab("👁️ Preview", id=0):
            preview = gr.HTML(render_placeholder())
        with gr.Tab("🧾 Código", id=1):
            source = gr.Code(language="html", interactive=False)
        with gr.Tab("💾 Download", id=2):
            download_file = gr.File(label="💾 Baixar HTML", interactive=False)

    # EVENTS
    prompt_box.change(
        fn=on_prompt_change,
        inputs=[prompt_box, area_state],
        outputs=[area_state, generate_btn],
    )
    file_input.change(
        fn=on_file_change,
        inputs=[file_input, area_state],
        outputs=[area_state, file_pill, file_input, generate_btn, hint],
    )

    for trigger in (generate_btn.click, prompt_box.submit):
        trigger(
            fn=start_generation,
            inputs=[prompt_box, file_input, area_state],
            outputs=[area_state, request_state, prompt_box, file_input, file_pill, generate_btn, hint],
        ).then(
            fn=run_generation,
            inputs=[request_state],
            outputs=[preview, source, download_file],
        ).then(
            fn=finish_generation,
            inputs=[area_state],
            outputs=[area_state, prompt_box, file_input, generate_btn],
        )


vivify_theme = gr.themes.Soft(
    primary_hue="blue",
    secondary_hue="zinc",
    neutral_hue="zinc",
    spacing_size="md",
    radius_size="lg",
).set(
    body_background_fill="#09090b",
    body_background_fill_dark="#09090b",
    background_fill_primary="#18181b",
    background_fill_primary_dark="#18181b",
    border_color_primary="#3f3f46",
    border_color_primary_dark="#3f3f46",
    body_text_color="#f4f4f5",
    body_text_color_dark="#f4f4f5",
)

vivify_css = """
.gradio-container {
    font-family: 'Inter', -apple-system, BlinkMacSystemFont, 'Segoe UI', sans-serif !important;
    max-width: 1100px !important;
    margin: 0 auto !important;
}

.main-header {
    text-align: center;
    padding: 2rem 0 1rem;
}

.main-header h1 {
    font-size: 2.5rem;
    font-weight: 600;
    letter-spacing: -0.02em;
    margin: 0;
}

.main-header p {
    color: #a1a1aa;
}

.info-card.warning {
    background: rgba(234, 179, 8, 0.1);
    border: 1px solid rgba(234, 179, 8, 0.4);
    border-radius: 12px;
    padding: 0.75rem 1rem;
}

.input-area {
    max-width: 48rem;
    margin: 0 auto;
    background: rgba(24, 24, 27, 0.8);
    border: 1px solid rgba(63, 63, 70, 0.5);
    border-radius: 1rem;
    padding: 1rem;
}

.vivify-pill {
    display: flex;
    align-items: center;
    gap: 0.75rem;
    width: fit-content;
    padding: 0.5rem 0.75rem 0.5rem 0.5rem;
    border: 1px solid #3f3f46;
    border-radius: 0.5rem;
    background: rgba(39, 39, 42, 0.5);
}

.vivify-pill-icon {
    width: 40px;
    height: 40px;
    display: flex;
    align-items: center;
    justify-content: center;
    border-radius: 0.25rem;
    background: #3f3f46;
    color: #a1a1aa;
}

.vivify-pill-thumb {
    width: 100%;
    height: 100%;
    object-fit: cover;
    border-radius: 0.25rem;
    opacity: 0.8;
}

.vivify-pill-meta {
    display: flex;
    flex-direction: column;
    max-width: 200px;
}

.vivify-pill-name {
    font-size: 0.75rem;
    white-space: nowrap;
    overflow: hidden;
    text-overflow: ellipsis;
}

.vivify-pill-size {
    font-size: 10px;
    color: #71717a;
    text-transform: uppercase;
}

.vivify-empty {
    text-align: center;
    color: #71717a;
    padding: 6rem 1rem;
    border: 1px dashed #3f3f46;
    border-radius: 12px;
}
"""


if __name__ == "__main__":
    demo.launch(
        server_name=settings.HOST,
        server_port=settings.PORT,
        share=False,
        theme=vivify_theme,
        css=vivify_css,
    )
