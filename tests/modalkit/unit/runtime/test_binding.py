from __future__ import annotations

from modalkit.api.entries import DEFAULT_ENTRY, ModalEntry
from modalkit.runtime.binding import EntryBinding
from modalkit.runtime.registry import RuntimeModalRegistry
from tests.modalkit.fakes import ListenerSpy


def test_binding_snapshot_forwards_to_store(store: RuntimeModalRegistry) -> None:
    binding = EntryBinding(store, "m")
    assert binding.get_snapshot() is DEFAULT_ENTRY

    store.show("m", {"a": 1})

    assert binding.get_snapshot() is store.get_entry("m")
    assert binding.get_server_snapshot() is store.get_entry("m")
    assert binding.modal_id == "m"


def test_binding_snapshot_is_reference_stable_between_writes(store: RuntimeModalRegistry) -> None:
    binding = EntryBinding(store, "m")
    store.show("m")

    first = binding.get_snapshot()
    second = binding.get_snapshot()

    assert first is second


def test_binding_subscribe_only_sees_own_id(store: RuntimeModalRegistry) -> None:
    spy = ListenerSpy()
    EntryBinding(store, "m1").subscribe(spy)

    store.show("m2")
    store.show("m1")

    assert spy.count == 1


def test_binding_unsubscribe_forwards_to_store(store: RuntimeModalRegistry) -> None:
    spy = ListenerSpy()
    unsubscribe = EntryBinding(store, "m").subscribe(spy)

    unsubscribe()
    store.show("m")

    assert spy.count == 0


def test_watch_reports_each_new_entry(store: RuntimeModalRegistry) -> None:
    seen: list[ModalEntry] = []
    EntryBinding(store, "m").watch(seen.append)

    store.show("m", {"a": 1})
    store.close("m")
    store.close("m")

    assert [entry.open for entry in seen] == [True, False, False]
    assert seen[-1] is store.get_entry("m")


def test_watch_skips_notifications_without_reference_change() -> None:
    class StaleStore(RuntimeModalRegistry):
        def notify_only(self, modal_id: str) -> None:
            self._notify(modal_id)

    store = StaleStore()
    seen: list[ModalEntry] = []
    EntryBinding(store, "m").watch(seen.append)

    store.notify_only("m")
    store.show("m")
    store.notify_only("m")

    assert len(seen) == 1


def test_watch_unsubscribe_stops_reports(store: RuntimeModalRegistry) -> None:
    seen: list[ModalEntry] = []
    unsubscribe = EntryBinding(store, "m").watch(seen.append)

    unsubscribe()
    store.show("m")

    assert seen == []
