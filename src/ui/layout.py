"""Shared layout: header, keyboard shortcut banner, and content area."""
from nicegui import ui

from config import APP_TITLE
from src.ui.components.helpers import BRAND_COLOR

# Shortcut legend shown under the header
SHORTCUTS = [
    ("↑", "Key Saves the Updated Image Metadata"),
    ("↓", "Key Deletes the Current Image"),
    ("← →", "Keys Browse Previous / Next Product"),
]


def build_layout(title: str = APP_TITLE):
    """Create the shared page layout and return the main content container."""
    ui.colors(
        primary="#1E90FF",
        secondary="#5f6368",
        accent=BRAND_COLOR,
        positive="#34a853",
        negative="#FF6347",
    )
    ui.query("body").style("background-color: white; font-family: Arial, sans-serif")

    with ui.header().classes("items-center px-4 bg-white").style("border-bottom: 1px solid #ddd"):
        ui.label(title).classes("text-h5 font-bold").style(f"color: {BRAND_COLOR}")

    content = ui.column().classes("w-full p-6 max-w-7xl mx-auto gap-4")
    with content:
        _shortcut_banner()
        ui.separator()
    return content


def _shortcut_banner():
    with ui.column().classes("w-full items-center gap-1"):
        ui.label("KEYBOARD SHORTCUT").classes("text-caption")
        with ui.row().classes("justify-center gap-6"):
            for keys, text in SHORTCUTS:
                ui.label(f"{keys} {text}").classes("text-caption text-secondary")
