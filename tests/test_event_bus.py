from reelmatch.events.bus import EventBus


def test_event_bus_emit_subscribe():
    bus = EventBus()
    received = {}

    def handler(sender, **kwargs):
        received.update(kwargs)

    bus.subscribe("test", handler)
    bus.emit("test", value=42, msg="hello")

    assert received["value"] == 42
    assert received["msg"] == "hello"


def test_emit_without_subscribers_is_a_no_op():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_lambda_subscribers_stay_connected():
    bus = EventBus()
    seen = []
    bus.subscribe("spin", lambda sender, **payload: seen.append(payload))
    bus.emit("spin", spin_count=1)
    bus.emit("spin", spin_count=2)
    assert seen == [{"spin_count": 1}, {"spin_count": 2}]
