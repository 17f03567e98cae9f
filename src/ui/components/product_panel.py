"""Single-product review panel: image, review actions, navigation and details."""
from nicegui import ui

from src.services.utils import as_number, format_date, format_price
from src.ui.components.helpers import (
    INPUT_PROPS,
    action_button,
    product_image_src,
    section_header,
    status_badge,
)


def product_panel(
    product,
    *,
    on_approve,
    on_reject,
    on_review_later,
    on_previous,
    on_next,
    on_edit=None,
):
    """Render the review panel for *product*.

    Args:
        product: The selected ProductRecord.
        on_approve / on_reject / on_review_later: Review action callbacks.
        on_previous / on_next: Navigation callbacks.
        on_edit: Optional callback(field, value) for metadata edits; the edits
                 are saved with the up-arrow shortcut.
    """
    with ui.row().classes("w-full gap-5 mt-4 items-stretch no-wrap"):
        # Left: image + actions
        with ui.card().classes("p-5").style("width: 60%; min-width: 300px; min-height: 400px"):
            img_src = product_image_src(product)
            if img_src:
                ui.image(img_src).props("fit=contain").classes("w-full").style("max-height: 300px")
            else:
                with ui.column().classes("w-full items-center justify-center").style("height: 300px"):
                    ui.icon("image_not_supported", size="xl").classes("text-grey-5")
                    ui.label("No image").classes("text-caption text-secondary")

            ui.space()
            with ui.row().classes("w-full items-center justify-between mt-4"):
                with ui.row().classes("gap-2"):
                    action_button("Previous", "navigate", on_previous, icon="chevron_left")
                    action_button("Next", "navigate", on_next, icon="chevron_right")
                with ui.row().classes("gap-2"):
                    action_button("Approve", "approve", on_approve)
                    action_button("Reject", "reject", on_reject)
                    action_button("Review Later", "review_later", on_review_later)

        # Right: details
        with ui.card().classes("p-5").style("width: 40%; min-height: 400px"):
            section_header("Product Details", icon="info")
            with ui.column().classes("w-full gap-1 bg-grey-2 rounded p-3"):
                _detail_row("ID", product.id)
                _detail_row("Product ID", product.fdc_product_id)
                if on_edit is None:
                    _detail_row("Name", product.name)
                    _detail_row("Description", product.product_description)
                    _detail_row("Dimensions", product.product_dimensions)
                _detail_row("Product Image URI", product.product_image_uri)
                _detail_row("Created At", product.created_at)
                _detail_row("Updated At", product.updated_at)
                _detail_row("Price", format_price(product.price, na_text=""))
                _detail_row("Quantity", product.quantity)
                with ui.row().classes("items-center gap-2"):
                    ui.label("Status:").classes("text-body2 font-bold")
                    status_badge(product.status)
                _detail_row("Approved Date", format_date(product.updated_at))

            if on_edit is not None:
                section_header(
                    "Metadata", icon="edit",
                    subtitle="Click outside the field, then press ↑ to save your changes.",
                )
                ui.input(
                    "Name", value=product.name or "",
                    on_change=lambda e: on_edit("name", e.value),
                ).props(INPUT_PROPS).classes("w-full")
                ui.textarea(
                    "Description", value=product.product_description or "",
                    on_change=lambda e: on_edit("product_description", e.value),
                ).props(INPUT_PROPS).classes("w-full")
                ui.input(
                    "Dimensions", value=product.product_dimensions or "",
                    on_change=lambda e: on_edit("product_dimensions", e.value),
                ).props(INPUT_PROPS).classes("w-full")
                with ui.row().classes("w-full gap-2 no-wrap"):
                    ui.number(
                        "Price", value=as_number(product.price), format="%.2f",
                        on_change=lambda e: on_edit("price", e.value),
                    ).props(INPUT_PROPS).classes("flex-1")
                    ui.number(
                        "Quantity", value=as_number(product.quantity), precision=0,
                        on_change=lambda e: on_edit("quantity", e.value),
                    ).props(INPUT_PROPS).classes("flex-1")


def _detail_row(label: str, value):
    with ui.row().classes("gap-2 items-start no-wrap"):
        ui.label(f"{label}:").classes("text-body2 font-bold").style("flex-shrink: 0")
        ui.label("" if value is None else str(value)).classes("text-body2 break-all")
