"""Review queue controller -- status views, selection, pagination and transitions.

Holds the ephemeral state behind the review page. Every backend call goes
through ``ProductApiClient`` on a worker thread so the NiceGUI event loop
stays responsive; each successful mutation is followed by a full reload of
the product list instead of patching local state.
"""
import asyncio
import logging
from typing import Callable, Optional

from config import PAGE_SIZE
from src.models.product import (
    EDITABLE_FIELDS,
    NUMERIC_FIELDS,
    REVIEW_STATUSES,
    STATUS_APPROVED,
    STATUS_REJECTED,
    STATUS_REVIEW_LATER,
    ProductRecord,
)
from src.services.product_api import ProductApiClient, ProductApiError
from src.services.utils import as_number

logger = logging.getLogger(__name__)

VIEW_ALL = "all"
VIEW_APPROVED = "approved"
VIEW_REJECTED = "rejected"
VIEW_REVIEW_LATER = "reviewLater"

# Filtered view -> status it lists
VIEW_STATUSES = {
    VIEW_APPROVED: STATUS_APPROVED,
    VIEW_REJECTED: STATUS_REJECTED,
    VIEW_REVIEW_LATER: STATUS_REVIEW_LATER,
}
VIEWS = (VIEW_ALL,) + tuple(VIEW_STATUSES)

_STATUS_TO_VIEW = {status: view for view, status in VIEW_STATUSES.items()}

# Keyboard shortcuts (KeyboardEvent.key names)
KEY_SAVE_METADATA = "ArrowUp"
KEY_DELETE_IMAGE = "ArrowDown"
KEY_PREVIOUS = "ArrowLeft"
KEY_NEXT = "ArrowRight"
KEY_CANCEL = "Escape"


def derive_views(records: list[ProductRecord]) -> dict[str, list[ProductRecord]]:
    """Partition *records* by status into the three filtered views.

    Single pass, order-preserving. Records whose status matches none of the
    filtered views (e.g. Pending) appear only in the unfiltered list.
    """
    views: dict[str, list[ProductRecord]] = {view: [] for view in VIEW_STATUSES}
    for record in records:
        view = _STATUS_TO_VIEW.get(record.status)
        if view is not None:
            views[view].append(record)
    return views


def _same_value(field: str, current, draft) -> bool:
    if field in NUMERIC_FIELDS:
        current_num, draft_num = as_number(current), as_number(draft)
        if current_num is not None or draft_num is not None:
            return current_num == draft_num
    return current == draft

class ReviewQueueController:
    """State machine behind the review dashboard.

    Args:
        api: Backend client (defaults to a ``ProductApiClient`` on the
             configured base URL).
        page_size: Rows per page in the filtered views.
        on_change: Optional callback() fired after any state change.
        on_error: Optional callback(message) fired when a backend call fails.
    """

    def __init__(
        self,
        api: ProductApiClient | None = None,
        page_size: int = PAGE_SIZE,
        on_change: Callable[[], None] | None = None,
        on_error: Callable[[str], None] | None = None,
    ):
        if page_size < 1:
            raise ValueError("page_size must be >= 1")
        self.api = api or ProductApiClient()
        self.page_size = page_size
        self.on_change = on_change
        self.on_error = on_error

        self.records: list[ProductRecord] = []
        self.views = derive_views([])
        self.current_view = VIEW_ALL
        self.selected_index: Optional[int] = None
        self.pages = {view: 0 for view in VIEW_STATUSES}
        self.pending_reject = False
        self.last_error: Optional[str] = None
        self.metadata_draft: dict = {}

        self._load_seq = 0
        self._rejecting = False

    # ------------------------------------------------------------------
    # Derived state
    # ------------------------------------------------------------------

    @property
    def selected_record(self) -> Optional[ProductRecord]:
        if self.selected_index is None or not self.records:
            return None
        return self.records[self.selected_index]

    @property
    def in_review_mode(self) -> bool:
        """Single-record review is shown exactly in the unfiltered view."""
        return self.current_view == VIEW_ALL

    @property
    def counts(self) -> dict[str, int]:
        return {view: len(items) for view, items in self.views.items()}

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    async def load_all(self) -> bool:
        """Fetch every product and rebuild the views.

        Returns True when the fetched list was applied. A failed fetch, or one
        overtaken by a newer load, leaves the current state untouched.
        """
        self._load_seq += 1
        seq = self._load_seq

        try:
            records = await self._run(self.api.list_products)
        except ProductApiError as exc:
            if seq != self._load_seq:
                logger.debug("Ignoring failure of stale load #%d", seq)
                return False
            self._fail("Error fetching products", exc)
            return False

        if seq != self._load_seq:
            logger.debug("Discarding stale load #%d (latest is #%d)", seq, self._load_seq)
            return False

        self.records = list(records)
        self.views = derive_views(self.records)
        self.selected_index = 0 if self.records else None
        self.metadata_draft = {}
        self._clamp_pages()
        self.last_error = None
        logger.info(
            "Loaded %d products (%d approved, %d rejected, %d review later)",
            len(self.records),
            len(self.views[VIEW_APPROVED]),
            len(self.views[VIEW_REJECTED]),
            len(self.views[VIEW_REVIEW_LATER]),
        )
        self._changed()
        return True

    # ------------------------------------------------------------------
    # Status transitions
    # ------------------------------------------------------------------

    async def set_status(self, record: ProductRecord, status: str) -> bool:
        """Persist *status* for *record*, then reload everything.

        Returns True when the backend accepted the update.
        """
        if status not in REVIEW_STATUSES:
            raise ValueError(
                f"Invalid status {status!r}; expected one of {', '.join(REVIEW_STATUSES)}"
            )
        try:
            await self._run(self.api.update_status, record.id, status)
        except ProductApiError as exc:
            self._fail(f"Error updating product {record.id}", exc)
            return False

        await self.load_all()
        return True

    async def approve(self) -> bool:
        return await self._transition(STATUS_APPROVED)

    async def review_later(self) -> bool:
        return await self._transition(STATUS_REVIEW_LATER)

    def request_reject(self) -> bool:
        """Open the reject confirmation. Nothing is sent to the backend yet."""
        if self.selected_record is None:
            return False
        if not self.pending_reject:
            self.pending_reject = True
            self._changed()
        return True

    async def confirm_reject(self) -> bool:
        """Reject the selected record; the confirmation closes once the attempt completes."""
        if not self.pending_reject or self._rejecting:
            return False
        self._rejecting = True
        try:
            record = self.selected_record
            if record is None:
                return False
            return await self.set_status(record, STATUS_REJECTED)
        finally:
            self._rejecting = False
            self.pending_reject = False
            self._changed()

    def cancel_reject(self) -> bool:
        """Close the confirmation; ignored once the reject has been sent."""
        if not self.pending_reject or self._rejecting:
            return False
        self.pending_reject = False
        self._changed()
        return True

    async def _transition(self, status: str) -> bool:
        record = self.selected_record
        if record is None:
            return False
        if self.pending_reject:
            logger.debug("Ignoring %s while a reject confirmation is open", status)
            return False
        return await self.set_status(record, status)

    # ------------------------------------------------------------------
    # Metadata edits
    # ------------------------------------------------------------------

    def update_metadata(self, field: str, value) -> None:
        """Stage an edit of the selected record's descriptive field."""
        if field not in EDITABLE_FIELDS:
            raise ValueError(f"Field {field!r} is not editable")
        self.metadata_draft[field] = value

    async def save_metadata(self) -> bool:
        """Send staged edits of the selected record, then reload.

        Only fields whose value differs from the record are sent.
        """
        record = self.selected_record
        if record is None or self.pending_reject or not self.metadata_draft:
            return False

        changes = {
            key: value
            for key, value in self.metadata_draft.items()
            if not _same_value(key, getattr(record, key), value)
        }
        if not changes:
            self.metadata_draft = {}
            return False

        try:
            await self._run(self.api.update_product, record.id, changes)
        except ProductApiError as exc:
            self._fail(f"Error saving product {record.id}", exc)
            return False

        await self.load_all()
        return True

    # ------------------------------------------------------------------
    # Navigation
    # ------------------------------------------------------------------

    def next(self) -> None:
        self._step(1)

    def previous(self) -> None:
        self._step(-1)

    def select(self, record: ProductRecord) -> bool:
        """Review *record* in the unfiltered view ("Analyze Again")."""
        if self.pending_reject:
            return False
        for idx, candidate in enumerate(self.records):
            if candidate.id == record.id:
                self.selected_index = idx
                self.metadata_draft = {}
                self.current_view = VIEW_ALL
                self._changed()
                return True
        return False

    def _step(self, offset: int) -> None:
        # The selection stays put under an open reject confirmation
        if not self.records or self.pending_reject:
            return
        self.selected_index = (self.selected_index + offset) % len(self.records)
        self.metadata_draft = {}
        self._changed()

    # ------------------------------------------------------------------
    # Views and pagination
    # ------------------------------------------------------------------

    def set_view(self, view: str) -> None:
        if view not in VIEWS:
            raise ValueError(f"Unknown view {view!r}")
        self.current_view = view
        self._changed()

    def next_page(self, view: str | None = None) -> None:
        """Advance the page counter; bounds are checked by ``has_next_page``."""
        view = self._paged_view(view)
        self.pages[view] += 1
        self._changed()

    def previous_page(self, view: str | None = None) -> None:
        view = self._paged_view(view)
        self.pages[view] = max(0, self.pages[view] - 1)
        self._changed()

    def page_items(self, view: str | None = None) -> list[ProductRecord]:
        view = self._paged_view(view)
        start = self.pages[view] * self.page_size
        return self.views[view][start:start + self.page_size]

    def has_next_page(self, view: str | None = None) -> bool:
        view = self._paged_view(view)
        return (self.pages[view] + 1) * self.page_size < len(self.views[view])

    def has_previous_page(self, view: str | None = None) -> bool:
        view = self._paged_view(view)
        return self.pages[view] > 0

    def _paged_view(self, view: str | None) -> str:
        view = self.current_view if view is None else view
        if view not in VIEW_STATUSES:
            raise ValueError(f"View {view!r} is not paginated")
        return view

    def _clamp_pages(self) -> None:
        for view, items in self.views.items():
            last_page = max(0, (len(items) - 1) // self.page_size)
            if self.pages[view] > last_page:
                logger.debug("Clamping %s page %d -> %d", view, self.pages[view], last_page)
                self.pages[view] = last_page

    # ------------------------------------------------------------------
    # Keyboard shortcuts
    # ------------------------------------------------------------------

    async def handle_key(self, key: str) -> bool:
        """Dispatch a keyboard shortcut. Returns True if the key was handled."""
        if key == KEY_CANCEL:
            return self.cancel_reject()

        if not self.in_review_mode:
            return False

        if key == KEY_SAVE_METADATA:
            return await self.save_metadata()
        if key == KEY_DELETE_IMAGE:
            return self.request_reject()
        if key in (KEY_NEXT, KEY_PREVIOUS):
            if not self.records or self.pending_reject:
                return False
            self._step(1 if key == KEY_NEXT else -1)
            return True
        return False

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    async def _run(self, func, *args):
        return await asyncio.get_event_loop().run_in_executor(None, func, *args)

    def _fail(self, message: str, exc: Exception) -> None:
        self.last_error = f"{message}: {exc}"
        logger.warning("%s: %s", message, exc)
        if self.on_error:
            self.on_error(self.last_error)
        self._changed()

    def _changed(self) -> None:
        if self.on_change:
            self.on_change()
