"""Review page -- walk the product queue and approve, reject or defer each product."""
import logging

from nicegui import ui
from nicegui.events import KeyEventArguments

from src.services import VIEW_ALL, VIEWS, ReviewQueueController
from src.services.review_queue import KEY_SAVE_METADATA
from src.ui.components import product_list, product_panel
from src.ui.components.helpers import VIEW_LABELS
from src.ui.layout import build_layout

logger = logging.getLogger(__name__)


def review_page(controller: ReviewQueueController | None = None):
    """Render the review queue page.

    Args:
        controller: Optional pre-built controller (a fresh one per client
                    otherwise, since view state is per operator session).
    """
    content = build_layout()
    controller = controller or ReviewQueueController()

    with content:

        @ui.refreshable
        def _tabs():
            counts = controller.counts
            with ui.row().classes("items-center gap-2"):
                for view in VIEWS:
                    active = controller.current_view == view
                    btn = ui.button(
                        VIEW_LABELS[view], on_click=lambda v=view: controller.set_view(v),
                    ).props("flat no-caps" if not active else "unelevated no-caps color=grey-3 text-color=black")
                    if view in counts:
                        with btn:
                            ui.badge(str(counts[view]), color="grey-6").props("floating rounded")

        @ui.refreshable
        def _error_banner():
            if not controller.last_error:
                return
            with ui.card().classes("w-full p-3 bg-red-1"):
                with ui.row().classes("w-full items-center gap-3 no-wrap"):
                    ui.icon("error_outline").classes("text-negative")
                    ui.label(controller.last_error).classes("text-body2 text-negative flex-1")
                    ui.button("Retry", icon="refresh", on_click=controller.load_all).props(
                        "color=negative outline dense"
                    )

        @ui.refreshable
        def _body():
            view = controller.current_view
            if view == VIEW_ALL:
                record = controller.selected_record
                if record is None:
                    ui.label("No products to review.").classes("text-body2 text-secondary")
                    return
                ui.label(
                    f"Product {controller.selected_index + 1} of {len(controller.records)}"
                ).classes("text-caption text-secondary")
                product_panel(
                    record,
                    on_approve=controller.approve,
                    on_reject=controller.request_reject,
                    on_review_later=controller.review_later,
                    on_previous=controller.previous,
                    on_next=controller.next,
                    on_edit=controller.update_metadata,
                )
                return

            product_list(
                controller.page_items(view),
                has_previous=controller.has_previous_page(view),
                has_next=controller.has_next_page(view),
                on_previous=lambda: controller.previous_page(view),
                on_next=lambda: controller.next_page(view),
                on_analyze=controller.select,
            )

        _tabs()
        _error_banner()
        _body()

    # Reject confirmation; stays open until the reject attempt has completed
    with ui.dialog().props("persistent") as reject_dialog, ui.card().classes("items-center"):
        ui.label("Are you sure you want to delete the image?").classes("text-subtitle1")
        ui.label("This action cannot be undone.").classes("text-body2 text-secondary")
        with ui.row().classes("justify-center gap-2 mt-4"):
            delete_btn = ui.button("Delete").props("color=negative")
            cancel_btn = ui.button("Cancel", on_click=controller.cancel_reject).props("flat")

    async def _confirm_reject():
        delete_btn.props("loading")
        cancel_btn.disable()
        try:
            if await controller.confirm_reject():
                ui.notify("Product rejected", type="info")
        finally:
            delete_btn.props(remove="loading")
            cancel_btn.enable()

    delete_btn.on_click(_confirm_reject)

    def _sync():
        _tabs.refresh()
        _error_banner.refresh()
        _body.refresh()
        if controller.pending_reject:
            reject_dialog.open()
        else:
            reject_dialog.close()

    def _notify_error(message: str):
        ui.notify(message, type="negative")

    controller.on_change = _sync
    controller.on_error = _notify_error

    async def _handle_key(e: KeyEventArguments):
        if not e.action.keydown or e.action.repeat:
            return
        key = e.key.name
        handled = await controller.handle_key(key)
        logger.debug("Key %s handled=%s", key, handled)
        if handled and key == KEY_SAVE_METADATA:
            ui.notify("Metadata saved", type="positive")

    # Scoped to this client; removed with the page when the client disconnects
    ui.keyboard(on_key=_handle_key)

    ui.timer(0.1, controller.load_all, once=True)
