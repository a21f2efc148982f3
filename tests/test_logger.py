import pytest

from stardust.logger import Level, get_log_level, log, log_buffer


@pytest.fixture
def set_level(monkeypatch):
    def _set(value):
        if value is None:
            monkeypatch.delenv("LOG_LVL", raising=False)
        else:
            monkeypatch.setenv("LOG_LVL", value)
        get_log_level.cache_clear()

    yield _set
    get_log_level.cache_clear()


def test_default_level_is_warn(set_level):
    set_level(None)
    assert get_log_level() is Level.WARN


@pytest.mark.parametrize(
    ("env", "expected"),
    [
        ("2", Level.DEBUG),
        ("1", Level.INFO),
        ("0", Level.WARN),
        ("5", Level.WARN),
        ("-1", Level.WARN),
        ("abc", Level.WARN),
        ("1xyz", Level.INFO),
    ],
)
def test_level_from_environment(set_level, env, expected):
    set_level(env)
    assert get_log_level() is expected


def test_level_is_cached(set_level, monkeypatch):
    set_level("2")
    assert get_log_level() is Level.DEBUG
    monkeypatch.setenv("LOG_LVL", "0")
    assert get_log_level() is Level.DEBUG


def test_log_formats_with_location(set_level, capsys):
    set_level("0")
    log(Level.WARN, "hello %d", 5)
    out = capsys.readouterr().out
    prefix = "[WARN]  [test_logger.py:test_log_formats_with_location ("
    suffix = ")] hello 5\n"
    assert out.startswith(prefix)
    assert out.endswith(suffix)
    line_number = out[len(prefix):-len(suffix)]
    assert line_number.isdigit()
    assert int(line_number) > 0


def test_log_without_args_is_verbatim(set_level, capsys):
    set_level("0")
    log(Level.WARN, "100%")
    assert capsys.readouterr().out.endswith("] 100%\n")


def test_messages_above_level_are_dropped(set_level, capsys):
    set_level("0")
    log(Level.DEBUG, "quiet")
    log(Level.INFO, "quiet")
    log_buffer(Level.DEBUG, b"\x01", 1)
    assert capsys.readouterr().out == ""


def test_debug_has_no_extra_spacing(set_level, capsys):
    set_level("2")
    log(Level.DEBUG, "x")
    assert capsys.readouterr().out.startswith("[DEBUG] [test_logger.py:")


def test_buffer_truncated(set_level, capsys):
    set_level("0")
    log_buffer(Level.WARN, bytes([0x01, 0xAB, 0xFF]), 2)
    assert capsys.readouterr().out.endswith("] 01 ab ... (3 bytes total)\n")


def test_buffer_shorter_than_limit(set_level, capsys):
    set_level("0")
    log_buffer(Level.WARN, bytes([0x01, 0xAB, 0xFF]), 10)
    assert capsys.readouterr().out.endswith("] 01 ab ff \n")


def test_buffer_equal_to_limit_reports_total(set_level, capsys):
    set_level("0")
    log_buffer(Level.WARN, bytearray([0x01, 0xAB, 0xFF]), 3)
    assert capsys.readouterr().out.endswith("] 01 ab ff ... (3 bytes total)\n")