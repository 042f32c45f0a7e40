import pytest

from fontatlas import log


@pytest.fixture
def records():
    captured = []
    handler = log.set_callback(lambda level, msg: captured.append((level, msg)))
    log.set_level("DEBUG")
    yield captured
    log._logger.removeHandler(handler)
    log.set_level("WARNING")


def test_messages(records):
    log.debug("packing")
    log.warning("careful")
    assert records == [("DEBUG", "packing"), ("WARNING", "careful")]


def test_exception_with_context(records):
    try:
        raise ValueError("boom")
    except ValueError as e:
        log.error(e, "Atlas baking failed")

    level, msg = records[-1]
    assert level == "ERROR"
    assert msg.startswith("Atlas baking failed: ValueError: boom")
    assert "Traceback" in msg


def test_level_filter(records):
    log.set_level("ERROR")
    log.info("hidden")
    assert records == []
