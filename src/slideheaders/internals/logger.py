"""
Logging setup for applications that embed slideheaders.

The library itself only ever calls `logging.getLogger("slideheaders")` and
never configures handlers. A host application (or a script driving the
library) calls `setup_logger()` once at startup to get console and file output
for the package, with the session id in every log line.
"""

import logging

from slideheaders.internals.paths import user_log_dir_path
from slideheaders.internals.run_context import get_session_id
from slideheaders.utils import get_debug_mode

# Set on every handler setup_logger() adds, so handlers added by the host
# application or a test runner are left alone and not mistaken for ours.
_OWNED_HANDLER_ATTR = "_slideheaders_owned"


# region owned_handlers
def owned_handlers(logger: logging.Logger) -> list[logging.Handler]:
    """Handlers on `logger` that setup_logger() added."""
    return [h for h in logger.handlers if getattr(h, _OWNED_HANDLER_ATTR, False)]


# endregion


# region setup_logger
def setup_logger(
    name: str = "slideheaders",
    level: int = logging.DEBUG,
    enable_trace: bool | None = None,
) -> logging.Logger:
    """
    Attach console and file handlers to the package logger.

    Safe to call multiple times: if this function already configured the
    logger, it is returned untouched. Handlers someone else attached do not
    count as configured.

    Args:
        name: Logger name (default: "slideheaders")
        level: Minimum log level (default: DEBUG)
        enable_trace: Also write a trace log with file/function/line of each record
            (default: follow debug mode, see utils.get_debug_mode)

    Returns:
        Configured logger instance

    Example:
        >>> log = setup_logger()
        >>> log.info("Resolving header/footer settings")
        2025-01-09 14:23:45 [INFO] Resolving header/footer settings [session:a1b2c3d4]
    """
    logger = logging.getLogger(name)
    if owned_handlers(logger):
        return logger

    if enable_trace is None:
        enable_trace = get_debug_mode()

    logger.setLevel(level)
    # Keep slideheaders logs out of the host application's root logger.
    logger.propagate = False

    session_id = get_session_id()
    log_dir = user_log_dir_path()
    log_file = log_dir / "slideheaders.log"

    formatter = logging.Formatter(
        f"%(asctime)s [%(levelname)s] %(message)s [session:{session_id}]",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    file_handler = logging.FileHandler(log_file, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    handlers: list[logging.Handler] = [console_handler, file_handler]
    for handler in handlers:
        handler.setFormatter(formatter)

    if enable_trace:
        trace_handler = logging.FileHandler(
            log_dir / "trace_slideheaders.log", encoding="utf-8"
        )
        trace_handler.setLevel(logging.DEBUG)
        trace_handler.setFormatter(
            logging.Formatter(
                "%(filename)s: %(funcName)s(), Line: %(lineno)d: - [%(levelname)s] "
                f"%(asctime)s - %(message)s -- [session_id={session_id}]",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        handlers.append(trace_handler)

    for handler in handlers:
        setattr(handler, _OWNED_HANDLER_ATTR, True)
        logger.addHandler(handler)

    logger.info(f"Logger initialized. Writing to {log_file}")
    return logger


# endregion
