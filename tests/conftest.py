from __future__ import annotations

from datetime import datetime

import pytest

from time_server.app import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 3, 5, 9, 7, 42)


@pytest.fixture
def client(fixed_now: datetime):
    app = create_app(clock=lambda: fixed_now, config={"TESTING": True})
    return app.test_client()
