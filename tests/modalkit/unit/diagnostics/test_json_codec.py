from __future__ import annotations

import json
from types import MappingProxyType

from modalkit.diagnostics.json_codec import dumps_bytes, dumps_text


def test_dumps_text_serializes_payload_proxies_and_callables() -> None:
    def on_ok() -> None:
        return None

    text = dumps_text({"payload": MappingProxyType({"title": "T"}), "on_ok": on_ok})
    decoded = json.loads(text)

    assert decoded["payload"] == {"title": "T"}
    assert decoded["on_ok"].startswith("<function")


def test_dumps_bytes_sort_keys_and_pretty() -> None:
    raw = dumps_bytes({"b": 1, "a": 2}, sort_keys=True, pretty=True)

    assert raw.decode("utf-8").index('"a"') < raw.decode("utf-8").index('"b"')
    assert b"\n" in raw
