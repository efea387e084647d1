from datetime import datetime

from termcells.events import EventFocus, EventInterrupt, EventTime


def test_set_event_time_round_trip():
    ev = EventTime()
    stamp = datetime(2020, 1, 2, 3, 4, 5)
    ev.set_event_time(stamp)
    assert ev.when() == stamp


def test_event_time_initial_value():
    stamp = datetime(2019, 5, 6)
    assert EventTime(stamp).when() == stamp


def test_set_event_now():
    ev = EventTime(datetime(2000, 1, 1))
    before = datetime.now()
    ev.set_event_now()
    after = datetime.now()
    assert before <= ev.when() <= after


def test_event_focus():
    assert EventFocus(True).focused is True
    assert EventFocus(False).focused is False


def test_event_focus_has_time():
    before = datetime.now()
    ev = EventFocus(True)
    assert before <= ev.when() <= datetime.now()


def test_event_interrupt_payload():
    payload = {"redraw": 3}
    ev = EventInterrupt(payload)
    assert ev.data() is payload


def test_event_interrupt_default_payload():
    assert EventInterrupt().data() is None


def test_event_interrupt_time():
    before = datetime.now()
    ev = EventInterrupt("x")
    after = datetime.now()
    assert before <= ev.when() <= after