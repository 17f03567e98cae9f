from __future__ import annotations

import pytest

from src.services.review_queue import ReviewQueueController
from tests.fakes import FakeProductApi


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture()
def api():
    return FakeProductApi()


@pytest.fixture()
def errors():
    return []


@pytest.fixture()
def controller(api, errors):
    return ReviewQueueController(api=api, page_size=8, on_error=errors.append)
