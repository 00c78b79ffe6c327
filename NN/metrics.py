# NN/metrics.py
from __future__ import annotations
from typing import Dict, Optional
import numpy as np


class RunningError:
    """
    Per-pass error tracker: exponential moving average plus mean/min/max
    over the last `window` passes (numpy ring, fixed size).
    """

    def __init__(self, alpha: float = 0.1, window: int = 100):
        if not 0.0 < alpha <= 1.0:
            raise ValueError(f"alpha must be in (0, 1], got {alpha}")
        if window < 1:
            raise ValueError(f"window must be >= 1, got {window}")
        self.alpha = alpha
        self.window = window
        self.ema: Optional[float] = None
        self.count = 0
        self._recent = np.zeros(window, dtype=np.float64)

    def update(self, err: float) -> Dict[str, float]:
        err = float(err)
        self.ema = err if self.ema is None else self.alpha * err + (1 - self.alpha) * self.ema
        self._recent[self.count % self.window] = err
        self.count += 1
        return self.summary()

    def summary(self) -> Dict[str, float]:
        filled = self._recent[:min(self.count, self.window)]
        if filled.size == 0:
            return {"ema": 0.0, "mean": 0.0, "min": 0.0, "max": 0.0}
        return {
            "ema": float(self.ema),
            "mean": float(filled.mean()),
            "min": float(filled.min()),
            "max": float(filled.max()),
        }
