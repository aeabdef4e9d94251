import itertools
import logging
import sys
from pathlib import Path

LOG_FORMAT = "[%(asctime)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_run_ids = itertools.count(1)


def console(component: str, msg: str) -> None:
    print(f"[{component}] {msg}", file=sys.stderr, flush=True)


class RunLog:
    """
    Logger bound to a single launcher run.

    With a path, records go to that file (truncated on open); without one they
    are discarded. Records never propagate to the root logger, so a run log
    does not echo onto the console.
    """

    def __init__(self, path: Path | None, *, name: str = "epp_launcher"):
        self.path = path
        self.logger = logging.getLogger(f"{name}.run{next(_run_ids)}")
        self.logger.setLevel(logging.INFO)
        self.logger.propagate = False
        if path is None:
            self._handler: logging.Handler = logging.NullHandler()
        else:
            self._handler = logging.FileHandler(path, mode="w", encoding="utf-8")
            self._handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.logger.addHandler(self._handler)

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def close(self) -> None:
        self.logger.removeHandler(self._handler)
        self._handler.close()

    def __enter__(self) -> "RunLog":
        return self

    def __exit__(self, *exc) -> None:
        self.close()
