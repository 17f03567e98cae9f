"""Paginated product table for the filtered status views."""
from nicegui import ui

from src.services.utils import format_date
from src.ui.components.helpers import HOVER_BG, product_thumbnail


def product_list(
    products: list,
    *,
    has_previous: bool,
    has_next: bool,
    on_previous,
    on_next,
    on_analyze=None,
):
    """Render one page of a filtered view.

    Args:
        products: Records on the current page.
        has_previous / has_next: Whether the page controls are offered.
        on_previous / on_next: Page control callbacks.
        on_analyze: Optional callback(product) for the "Analyze Again" link.
    """
    with ui.card().classes("w-full p-0 mt-4"):
        with ui.row().classes("w-full px-4 py-3 gap-4 bg-[#F0F8FF] font-bold"):
            ui.label("Images").classes("w-24")
            ui.label("Approved On").classes("w-40")
            ui.label("Actions").classes("flex-1")

        if not products:
            ui.label("No products").classes("text-body2 text-secondary px-4 py-3")

        for product in products:
            with ui.row().classes(f"w-full px-4 py-2 gap-4 items-start border-b {HOVER_BG}"):
                with ui.element("div").classes("w-24"):
                    product_thumbnail(product, size=50)
                ui.label(format_date(product.updated_at)).classes("w-40 text-body2")
                with ui.element("div").classes("flex-1"):
                    if on_analyze:
                        ui.label("Analyze Again").classes(
                            "text-blue-8 underline cursor-pointer"
                        ).on("click", lambda _, p=product: on_analyze(p))

        if has_previous or has_next:
            with ui.row().classes("w-full justify-center gap-2 py-3"):
                if has_previous:
                    ui.button("Previous Page", on_click=on_previous).props("outline dense no-caps")
                if has_next:
                    ui.button("Next Page", on_click=on_next).props("outline dense no-caps")
