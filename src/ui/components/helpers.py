"""Shared UI helper functions and design tokens for product display."""

from nicegui import ui

from src.models.product import (
    STATUS_APPROVED,
    STATUS_PENDING,
    STATUS_REJECTED,
    STATUS_REVIEW_LATER,
)
from src.services.review_queue import VIEW_ALL, VIEW_APPROVED, VIEW_REJECTED, VIEW_REVIEW_LATER


# ─── Design Tokens ────────────────────────────────────────────────────────────

# Card & layout
INPUT_PROPS = "outlined dense"
HOVER_BG = "hover:bg-[#F0F8FF]"
BRAND_COLOR = "#F5C500"

# Action button colors
ACTION_COLORS = {
    "approve": {"bg": "#1E90FF", "text": "white"},
    "reject": {"bg": "#FF6347", "text": "white"},
    "review_later": {"bg": "#FFD700", "text": "black"},
    "navigate": {"bg": "#1E90FF", "text": "white"},
}


def section_header(title: str, icon: str | None = None, subtitle: str | None = None):
    """Render a consistent card section header with accent-colored icon."""
    with ui.row().classes("items-center gap-2 mb-2"):
        if icon:
            ui.icon(icon).classes("text-accent")
        ui.label(title).classes("text-subtitle1 font-bold")
    if subtitle:
        ui.label(subtitle).classes("text-caption text-secondary")


def action_button(label: str, kind: str, on_click, icon: str | None = None):
    """Render a solid action button in one of the ACTION_COLORS styles."""
    colors = ACTION_COLORS[kind]
    return ui.button(label, icon=icon, on_click=on_click).props("unelevated no-caps").style(
        f"background-color: {colors['bg']} !important; color: {colors['text']}"
    )


# ─── Status Badges ────────────────────────────────────────────────────────────

# Product status badge colors and labels (shared across components)
STATUS_COLORS = {
    STATUS_PENDING: "grey-5",
    STATUS_APPROVED: "positive",
    STATUS_REJECTED: "negative",
    STATUS_REVIEW_LATER: "warning",
}
STATUS_LABELS = {
    STATUS_PENDING: "Pending",
    STATUS_APPROVED: "Approved",
    STATUS_REJECTED: "Rejected",
    STATUS_REVIEW_LATER: "Review Later",
}

# Tab labels for the queue views
VIEW_LABELS = {
    VIEW_ALL: "Analyse",
    VIEW_APPROVED: "Approved",
    VIEW_REJECTED: "Rejected",
    VIEW_REVIEW_LATER: "Review Later",
}


def status_badge(status: str | None):
    """Render a colored badge for a product status (unknown statuses in grey)."""
    label = STATUS_LABELS.get(status, status or "Unknown")
    ui.badge(label, color=STATUS_COLORS.get(status, "grey-5"))


# Predefined palette for letter-avatar backgrounds
AVATAR_COLORS = [
    "#E57373", "#F06292", "#BA68C8", "#9575CD", "#7986CB",
    "#64B5F6", "#4FC3F7", "#4DD0E1", "#4DB6AC", "#81C784",
    "#AED581", "#DCE775", "#FFD54F", "#FFB74D", "#FF8A65",
    "#A1887F", "#90A4AE",
]


def avatar_color(name: str) -> str:
    """Return a deterministic color based on the first letter of *name*."""
    idx = ord(name[0].upper()) % len(AVATAR_COLORS) if name else 0
    return AVATAR_COLORS[idx]


def product_thumbnail(product, size: int = 50) -> None:
    """Render a compact product image with fallback to a letter avatar."""
    img_src = product_image_src(product)
    if img_src:
        ui.image(img_src).classes("rounded").props("fit=contain").style(
            f"width: {size}px; height: {size}px; flex-shrink: 0"
        )
        return
    name = getattr(product, "name", None) or "?"
    ui.avatar(
        name[0].upper(), color=avatar_color(name), text_color="white",
        size=f"{size}px", font_size=f"{size // 3}px",
    ).classes("rounded")


def product_image_src(product) -> str | None:
    """Return the image URI for a product.

    Works with both ProductRecord objects and dicts with a
    'product_image_uri' key.
    """
    uri = getattr(product, "product_image_uri", None)
    if uri is None and isinstance(product, dict):
        uri = product.get("product_image_uri")
    return uri or None
