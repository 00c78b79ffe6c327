from __future__ import annotations
import csv, os
from typing import Dict, Any, Protocol, Callable

PASS_KEYS = [
    "step",
    "pass/error", "pass/error_ema", "pass/error_mean",
    "pass/output_mean", "pass/output_min", "pass/output_max",
]

class Logger(Protocol):
    def log(self, step: int, scalars: Dict[str, Any]) -> None: ...
    def flush(self) -> None: ...
    def close(self) -> None: ...


class CSVLogger:
    """Append-only CSV logger with header auto-discovery or predefined schema."""
    def __init__(self, path: str, fieldnames: list[str] | None = None):
        parent = os.path.dirname(path)
        if parent:
            os.makedirs(parent, exist_ok=True)
        self.path = path
        self._fieldnames = fieldnames
        self._file = open(path, "a", newline="")
        self._writer = None

    def log(self, step: int, scalars: Dict[str, Any]) -> None:
        scalars = {"step": step, **scalars}
        if self._writer is None:
            if self._fieldnames is None:
                self._fieldnames = list(scalars.keys())
            self._writer = csv.DictWriter(
                self._file,
                fieldnames=self._fieldnames,
                extrasaction="ignore",   # unseen keys are dropped
            )
            if self._file.tell() == 0:
                self._writer.writeheader()
        self._writer.writerow(scalars)

    def flush(self) -> None:
        self._file.flush()

    def close(self) -> None:
        self._file.close()

    def __enter__(self) -> "CSVLogger":
        return self

    def __exit__(self, *exc) -> None:
        self.close()


def make_pass_logger(logger: Logger, log_every: int = 1) -> Callable[[Dict[str, Any]], None]:
    """
    Returns a function(stats) -> None that writes forward-pass scalars
    every `log_every` passes. `stats` comes from NN.evaluate.
    """
    log_every = max(1, int(log_every))

    def _on_pass(stats: Dict[str, Any]) -> None:
        step = stats.get("step")
        if step is None:
            return
        if step % log_every != 0:
            return
        scalars = {
            "pass/error": stats.get("error"),
            "pass/error_ema": stats.get("error_ema"),
            "pass/error_mean": stats.get("error_mean"),
            "pass/output_mean": stats.get("output_mean"),
            "pass/output_min": stats.get("output_min"),
            "pass/output_max": stats.get("output_max"),
        }
        logger.log(int(step), scalars)
    return _on_pass
