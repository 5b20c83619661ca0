import io
import struct

from bongocat import input as keyinput


def _record(ev_type, code, value, sec=1, usec=2):
    return struct.pack(keyinput.EVENT_FORMAT, sec, usec, ev_type, code, value)


def _stream(*records):
    return io.BytesIO(b"".join(records))


def test_key_events_are_decoded():
    stream = _stream(_record(keyinput.EV_KEY, keyinput.KEY_A, 1, sec=10, usec=20))
    assert list(keyinput.iter_key_events(stream)) == [
        keyinput.KeyEvent(10, 20, keyinput.KEY_A, 1)
    ]


def test_non_key_events_are_skipped():
    stream = _stream(
        _record(0, 0, 0),
        _record(keyinput.EV_KEY, keyinput.KEY_A, 0),
        _record(4, 4, 30),
    )
    events = list(keyinput.iter_key_events(stream))
    assert [e.value for e in events] == [0]


def test_only_presses_are_reported():
    stream = _stream(
        _record(keyinput.EV_KEY, keyinput.KEY_A, 1),
        _record(keyinput.EV_KEY, keyinput.KEY_A, 2),
        _record(keyinput.EV_KEY, keyinput.KEY_A, 0),
        _record(keyinput.EV_KEY, keyinput.KEY_A, 1),
    )
    presses = list(keyinput.iter_key_presses(stream))
    assert len(presses) == 2
    assert all(p.is_press for p in presses)


def test_truncated_trailing_record_is_dropped():
    data = _record(keyinput.EV_KEY, keyinput.KEY_A, 1) + b"\x00" * 5
    assert len(list(keyinput.iter_key_events(io.BytesIO(data)))) == 1


def test_empty_stream_yields_nothing():
    assert list(keyinput.iter_key_presses(io.BytesIO(b""))) == []


def test_has_key_bitmap():
    bitmap = bytearray(keyinput.KEY_MAX // 8 + 1)
    assert keyinput._has_key(bytes(bitmap), keyinput.KEY_A) is False
    bitmap[keyinput.KEY_A // 8] |= 1 << (keyinput.KEY_A % 8)
    assert keyinput._has_key(bytes(bitmap), keyinput.KEY_A) is True


def test_missing_device_is_not_keyboard(tmp_path):
    assert keyinput.is_keyboard(tmp_path / "event0") is False


def test_regular_file_is_not_keyboard(tmp_path):
    path = tmp_path / "event0"
    path.write_bytes(b"\x00" * 64)
    assert keyinput.is_keyboard(path) is False


def test_keyboard_devices_in_missing_directory(tmp_path):
    assert keyinput.keyboard_devices(tmp_path / "nope") == []


def test_monitoring_ignores_non_devices(tmp_path):
    (tmp_path / "event0").write_bytes(b"")
    (tmp_path / "mouse0").write_bytes(b"")
    assert keyinput.start_input_monitoring(lambda: None, tmp_path) == []


def test_listener_notifies_once_per_press(tmp_path):
    path = tmp_path / "event3"
    path.write_bytes(
        _record(keyinput.EV_KEY, keyinput.KEY_A, 1)
        + _record(0, 0, 0)
        + _record(keyinput.EV_KEY, keyinput.KEY_A, 0)
        + _record(keyinput.EV_KEY, 31, 1)
    )
    calls = []
    keyinput._listen(path, lambda: calls.append(1))
    assert len(calls) == 2


def test_listener_reports_unopenable_device(tmp_path, capsys):
    calls = []
    keyinput._listen(tmp_path / "event9", lambda: calls.append(1))
    assert calls == []
    assert "input' group" in capsys.readouterr().err