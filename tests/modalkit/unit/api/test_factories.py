from __future__ import annotations

import pytest

import modalkit
from modalkit.api import (
    StoreConfig,
    create_entry_binding,
    create_modal_boundary,
    create_modal_control,
    create_modal_store,
    provide_modal_store,
)
from modalkit.api.errors import MissingScopeError
from modalkit.api.store import StoreMetricsSnapshot
from modalkit.runtime.registry import RuntimeModalRegistry
from tests.modalkit.fakes import FakeChromeRenderer


def test_create_modal_store_returns_isolated_registries() -> None:
    first = create_modal_store(config=StoreConfig())
    second = create_modal_store(config=StoreConfig())

    first.show("m")

    assert isinstance(first, RuntimeModalRegistry)
    assert first is not second
    assert second.get_entry("m").open is False


def test_create_modal_store_attaches_metrics_when_enabled() -> None:
    store = create_modal_store(config=StoreConfig(metrics_enabled=True, metrics_per_modal=True))
    store.subscribe("m", lambda: None)

    store.show("m")

    snapshot = store.metrics_snapshot()
    assert snapshot.mutation_counts == {"show": 1}
    assert snapshot.notifications_by_modal == {"m": 1}


def test_create_modal_store_reads_environment_by_default(monkeypatch) -> None:
    monkeypatch.setenv("MODALKIT_METRICS", "1")
    monkeypatch.delenv("MODALKIT_METRICS_PER_MODAL", raising=False)

    store = create_modal_store()
    store.subscribe("m", lambda: None)
    store.show("m")
    store.close("m")

    snapshot = store.metrics_snapshot()
    assert snapshot.mutation_counts == {"show": 1, "close": 1}
    assert snapshot.notification_count == 2
    assert snapshot.notifications_by_modal == {}


def test_package_create_store_builds_registry(monkeypatch) -> None:
    monkeypatch.delenv("MODALKIT_METRICS", raising=False)

    store = modalkit.create_store()
    store.show("m")

    assert isinstance(store, RuntimeModalRegistry)
    assert store.metrics_snapshot() == StoreMetricsSnapshot()


def test_control_and_boundary_resolve_provided_store() -> None:
    store = create_modal_store(config=StoreConfig())
    renderer = FakeChromeRenderer()

    with provide_modal_store(store):
        control = create_modal_control("m", {"title": "Hello"})
        boundary = create_modal_boundary("m", renderer=renderer, render=lambda payload: payload["title"])

    control.show_modal()

    assert boundary.render().body == "Hello"
    assert create_entry_binding(store, "m").get_snapshot().open is True


def test_factories_without_provider_or_store_raise() -> None:
    with pytest.raises(MissingScopeError):
        create_modal_control("m")
    with pytest.raises(MissingScopeError):
        create_modal_boundary("m", renderer=FakeChromeRenderer(), render=lambda payload: None)


def test_explicit_store_wins_over_provider() -> None:
    provided = create_modal_store(config=StoreConfig())
    explicit = create_modal_store(config=StoreConfig())

    with provide_modal_store(provided):
        create_modal_control("m", store=explicit).show_modal()

    assert explicit.get_entry("m").open is True
    assert provided.get_entry("m").open is False
