from memory_match.events.bus import EventBus


def test_event_bus_delivers_payload_to_every_subscriber():
    bus = EventBus()
    received = []

    def first(sender, **kwargs):
        received.append(("first", kwargs["card_id"]))

    def second(sender, **kwargs):
        received.append(("second", kwargs["card_id"]))

    bus.subscribe("flip", first)
    bus.subscribe("flip", second)
    bus.emit("flip", card_id=4)

    assert sorted(received) == [("first", 4), ("second", 4)]


def test_event_bus_emit_without_subscribers_is_noop():
    bus = EventBus()
    bus.emit("nobody_listens", value=1)


def test_event_bus_unsubscribe_stops_delivery():
    bus = EventBus()
    calls = []

    def handler(sender, **kwargs):
        calls.append(kwargs)

    bus.subscribe("tick", handler)
    bus.unsubscribe("tick", handler)
    bus.emit("tick", dt=0.1)

    assert calls == []


def test_event_bus_payload_may_carry_a_name_key():
    bus = EventBus()
    received = []

    def handler(sender, **kwargs):
        received.append(kwargs)

    bus.subscribe("player_changed", handler)
    bus.emit("player_changed", name="Yuko")

    assert received == [{"name": "Yuko"}]
