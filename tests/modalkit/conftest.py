from __future__ import annotations

import pytest

from modalkit.runtime.registry import RuntimeModalRegistry
from tests.modalkit.fakes import FakeChromeRenderer


@pytest.fixture
def store() -> RuntimeModalRegistry:
    return RuntimeModalRegistry()


@pytest.fixture
def chrome_renderer() -> FakeChromeRenderer:
    return FakeChromeRenderer()
