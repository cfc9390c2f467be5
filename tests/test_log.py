import json

import structlog

from menu_order.log import configure_logging


def test_events_are_written_as_json_lines_and_file_is_owned_by_caller(tmp_path):
    path = tmp_path / "logs" / "debug.log"

    log_file = configure_logging(path)
    try:
        structlog.get_logger("menu_order.promo").info("promo_applied", code="ЁЛКА25")
    finally:
        structlog.reset_defaults()
        log_file.close()

    assert log_file.closed
    record = json.loads(path.read_text(encoding="utf-8").splitlines()[-1])
    assert record["event"] == "promo_applied"
    assert record["code"] == "ЁЛКА25"
    assert record["level"] == "info"
    assert "timestamp" in record
