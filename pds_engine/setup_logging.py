import logging
import sys
from pathlib import Path


def setup_logging(level: int = logging.INFO, log_dir: str | None = "logs", log_name: str = "sampler.log"):
    """
    Configures the root logger for scripts.
    - message format with time, level and source line
    - console output (stdout)
    - optional log file <log_dir>/<log_name>, overwritten on every start
    """
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        handlers.insert(0, logging.FileHandler(path / log_name, mode="w", encoding="utf-8"))

    logging.basicConfig(
        level=level,
        format="%(asctime)s.%(msecs)03d [%(levelname)s] %(name)s:%(lineno)d | %(message)s",
        datefmt="%H:%M:%S",
        handlers=handlers,
        force=True,  # drop old handlers so lines are not duplicated
    )

    # only our package logs in detail, the rest stays quiet
    logging.getLogger("pds_engine").setLevel(level)
    logging.getLogger("numba").setLevel(logging.WARNING)
    logging.getLogger("PIL").setLevel(logging.WARNING)
