"""
Context menu entries for digest results.

A result that carries context data gets a single "copy" entry bound to
Ctrl+C; everything else gets no context menu.
"""

from dataclasses import dataclass

from .router import ResultItem

COPY_GLYPH = "\ue8c8"  # Copy
GLYPH_FONT = "Segoe MDL2 Assets"


@dataclass(frozen=True)
class ContextMenuEntry:
    label: str
    glyph: str
    font_family: str
    accelerator_key: str
    accelerator_modifiers: tuple[str, ...]
    copy_text: str


def project_context_menu(record: ResultItem) -> list[ContextMenuEntry]:
    if not record.context_data:
        return []

    return [ContextMenuEntry(
        label="Copy to clipboard (Ctrl+C)",
        glyph=COPY_GLYPH,
        font_family=GLYPH_FONT,
        accelerator_key="C",
        accelerator_modifiers=("Ctrl",),
        copy_text=record.context_data,
    )]
