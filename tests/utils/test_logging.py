import logging

from app.utils.logging import log_error, log_warning, logger, setup_file_logging


def test_log_error_keeps_traceback_and_fields(caplog):
    error = RuntimeError("connection reset")
    with caplog.at_level(logging.ERROR, logger="app"):
        log_error(error, "Case created without its template tasks", case_id="case-1", template_id=None)

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "Case created without its template tasks: connection reset [case_id=case-1]"
    assert record.exc_info[1] is error
    assert record.context == {"case_id": "case-1", "template_id": None}


def test_log_warning_without_fields(caplog):
    with caplog.at_level(logging.WARNING, logger="app"):
        log_warning("Seed skipped")

    assert caplog.records[-1].getMessage() == "Seed skipped"
    assert caplog.records[-1].context == {}


def test_file_logging_writes_to_dated_file(tmp_path):
    handler = setup_file_logging(str(tmp_path / "logs"))
    try:
        assert setup_file_logging(str(tmp_path / "logs")) is handler
        log_warning("Page request without a valid session", method="GET", path="/dashboard")
        handler.flush()

        [log_file] = (tmp_path / "logs").glob("caseflow_*.log")
        content = log_file.read_text(encoding="utf-8")
        assert "WARNING" in content
        assert "method=GET path=/dashboard" in content
    finally:
        logger.removeHandler(handler)
        handler.close()
