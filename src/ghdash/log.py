"""Console logging setup.

If a Zipkin collector answers on the local machine, tracing is switched on:
every record down to the extra ``TRACE`` level is written to a trace log
file next to the configuration, while the console shows the requested
verbosity. Otherwise console logging is capped at ``DEBUG``. Console
records always go to stderr so the dashboard on stdout stays clean.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Callable, Optional

import httpx
import typer
from rich.console import Console
from rich.logging import RichHandler

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

PACKAGE_LOGGER = "ghdash"
ZIPKIN_HEALTH_URL = "http://localhost:9411/health"
TRACE_FILE = "trace.log"

_TRACE_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_VERBOSITY_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG, TRACE]

logger = logging.getLogger(__name__)


class Backend(str, Enum):
    TRACING = "tracing"
    PLAIN = "plain"


def level_for_verbosity(verbosity: int) -> int:
    """Map a ``-v`` count to a logging level."""
    verbosity = max(verbosity, 0)
    return _VERBOSITY_LEVELS[min(verbosity, len(_VERBOSITY_LEVELS) - 1)]


def trace_log_path() -> Path:
    return Path(typer.get_app_dir(PACKAGE_LOGGER)) / TRACE_FILE


def zipkin_reachable(url: str = ZIPKIN_HEALTH_URL, timeout: float = 0.5) -> bool:
    """True if a trace collector answers its health check at ``url``."""
    try:
        resp = httpx.get(url, timeout=timeout)
    except httpx.HTTPError:
        return False
    return resp.is_success


def select_backend(probe: Callable[[], bool]) -> Backend:
    return Backend.TRACING if probe() else Backend.PLAIN


def _trace_handler(path: Path) -> Optional[logging.FileHandler]:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.FileHandler(path, encoding="utf-8")
    except OSError as e:
        logger.warning("Tracing disabled, cannot open %s: %s", path, e)
        return None
    handler.setLevel(TRACE)
    handler.setFormatter(logging.Formatter(_TRACE_FORMAT))
    return handler


def get_logging(
    verbosity: int,
    probe: Callable[[], bool] = zipkin_reachable,
    trace_path: Optional[Path] = None,
) -> Backend:
    """Configure the ``ghdash`` logger and return the backend in use.

    Falls back to the plain backend when the trace file cannot be opened.
    """
    level = level_for_verbosity(verbosity)
    backend = select_backend(probe)

    pkg_logger = logging.getLogger(PACKAGE_LOGGER)
    for old in list(pkg_logger.handlers):
        pkg_logger.removeHandler(old)
        old.close()

    console = RichHandler(console=Console(stderr=True), show_path=False)
    pkg_logger.addHandler(console)
    pkg_logger.propagate = False

    tracer = None
    if backend is Backend.TRACING:
        tracer = _trace_handler(trace_path or trace_log_path())
        if tracer is None:
            backend = Backend.PLAIN

    if tracer is not None:
        pkg_logger.addHandler(tracer)
        pkg_logger.setLevel(TRACE)
        console.setLevel(level)
        logger.info(
            "Initialised tracing to %s and logging to console at %s",
            tracer.baseFilename,
            logging.getLevelName(level),
        )
    else:
        level = max(level, logging.DEBUG)
        pkg_logger.setLevel(level)
        console.setLevel(level)
        logger.info("Initialised logging to console at %s", logging.getLevelName(level))
    return backend
