"""
Logging helpers shared by the service layer and the middleware.

Records go to the "app" logger, the parent of every module logger under
``app.*``. Context is passed as keyword fields: it is appended to the message
as ``key=value`` pairs and kept on the record as ``record.context`` so a file
or JSON handler can pick it up.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

logger = logging.getLogger("app")


def setup_file_logging(log_dir: str, level: str = "INFO") -> logging.Handler:
    """
    Also write app records to ``<log_dir>/caseflow_<YYYYMMDD>.log``.

    Calling it again for the same file returns the handler already attached.
    """
    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    filename = log_path / f"caseflow_{datetime.now().strftime('%Y%m%d')}.log"

    for handler in logger.handlers:
        if isinstance(handler, logging.FileHandler) and Path(handler.baseFilename) == filename.resolve():
            return handler

    file_handler = logging.FileHandler(filename, encoding="utf-8")
    file_handler.setLevel(level)
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(file_handler)
    return file_handler


def _with_fields(message: str, fields: Dict[str, Any]) -> str:
    pairs = " ".join(f"{key}={value}" for key, value in fields.items() if value is not None)
    return f"{message} [{pairs}]" if pairs else message


def log_error(error: BaseException, message: str, **fields: Any) -> None:
    """
    Log a failure with its traceback.

    ``log_error(e, "Template tasks not created", case_id=case.id)`` gives
    ``Template tasks not created: <error> [case_id=case-...]``.
    """
    logger.error(
        _with_fields(f"{message}: {error}", fields),
        exc_info=error,
        extra={"context": fields},
    )


def log_warning(message: str, **fields: Any) -> None:
    logger.warning(_with_fields(message, fields), extra={"context": fields})
