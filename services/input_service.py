"""
State of the prompt input area (text, attached file, generating and disabled flags).

Kept independent from Gradio: app.py reads these rules to decide when the
"Gerar" button is clickable and what the widget shows.
"""
from dataclasses import dataclass
from typing import Callable, Optional

HINT_EMPTY = "Arraste imagens/PDFs"
HINT_ATTACHED = "Arquivo anexado"
LABEL_IDLE = "Gerar"
LABEL_BUSY = "Pensando..."


def can_submit(prompt: Optional[str], file_path: Optional[str], is_generating: bool, disabled: bool = False) -> bool:
    """At least one of prompt or file, and nothing already running."""
    if disabled or is_generating:
        return False
    return bool(prompt) or bool(file_path)


@dataclass
class InputArea:
    prompt: str = ""
    file_path: Optional[str] = None
    is_generating: bool = False
    disabled: bool = False

    @property
    def accepts_input(self) -> bool:
        return not self.disabled and not self.is_generating

    @property
    def can_submit(self) -> bool:
        return can_submit(self.prompt, self.file_path, self.is_generating, self.disabled)

    @property
    def hint(self) -> str:
        return HINT_ATTACHED if self.file_path else HINT_EMPTY

    @property
    def button_label(self) -> str:
        return LABEL_BUSY if self.is_generating else LABEL_IDLE

    def set_prompt(self, prompt: Optional[str]) -> None:
        self.prompt = prompt or ""

    def attach(self, file_path: Optional[str]) -> bool:
        """Picked or dropped file. Dropping is ignored while busy or disabled."""
        if not self.accepts_input or not file_path:
            return False
        self.file_path = file_path
        return True

    def remove_file(self) -> None:
        self.file_path = None

    def submit(self, on_generate: Callable[[str, Optional[str]], object]) -> bool:
        """
        Hands the collected prompt/file to `on_generate` and clears the widget.
        Returns False (and keeps the input) when submission is not allowed.
        """
        if not self.can_submit:
            return False

        on_generate(self.prompt, self.file_path or None)
        self.prompt = ""
        self.file_path = None
        return True
