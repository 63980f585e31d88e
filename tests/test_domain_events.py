from loadgrid.events.signal import Signal


def test_signal_connect_emit_disconnect():
    signal: Signal[str] = Signal()
    seen: list[str] = []

    def _handler(resource_id: str) -> None:
        seen.append(resource_id)

    signal.connect(_handler)
    signal.connect(_handler)
    assert signal.subscriber_count == 1

    signal.emit("r-1")
    signal.disconnect(_handler)
    signal.emit("r-2")

    assert seen == ["r-1"]
    assert signal.subscriber_count == 0


def test_signal_emit_prunes_dead_weakref_callbacks():
    signal: Signal[str] = Signal()
    seen: list[str] = []

    class _DeadProxyCallback:
        def __init__(self) -> None:
            self.calls = 0

        def __call__(self, _payload: str) -> None:
            self.calls += 1
            raise ReferenceError("weakly-referenced object no longer exists")

    dead = _DeadProxyCallback()

    def _ok(payload: str) -> None:
        seen.append(payload)

    signal.connect(dead)
    signal.connect(_ok)

    signal.emit("r-1")
    signal.emit("r-2")

    assert dead.calls == 1
    assert seen == ["r-1", "r-2"]
    assert signal.subscriber_count == 1
