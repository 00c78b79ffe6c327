# NN/evaluate.py
from __future__ import annotations
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Sequence

from linalg import ColumnVector
from interfaces import NetworkLike
from NN.logging import CSVLogger, PASS_KEYS, make_pass_logger
from NN.loss import mean_square_error
from NN.metrics import RunningError

if TYPE_CHECKING:
    from config import NetworkConfig


@dataclass(frozen=True)
class EvalResult:
    loss: float                       # mean_square_error over all samples
    outputs: tuple[ColumnVector, ...] # copies of the output layer, one per sample
    errors: tuple[float, ...]         # |output - desired|^2 per sample


def evaluate(
    network: NetworkLike,
    inputs: Sequence[ColumnVector],
    desired: Sequence[ColumnVector],
    on_pass: Optional[Callable[[Dict[str, Any]], None]] = None,
    ema_alpha: float = 0.1,
    window: int = 100,
) -> EvalResult:
    """
    Run one forward pass per sample and score the outputs.

    The network reuses its buffers between passes, so each output is copied
    before the next pass overwrites it.
    """
    if len(inputs) != len(desired):
        raise ValueError(f"got {len(inputs)} inputs but {len(desired)} desired outputs")
    if not inputs:
        raise ValueError("evaluate needs at least one sample")

    tracker = RunningError(ema_alpha, window)
    outputs: list[ColumnVector] = []
    errors: list[float] = []
    diff: Optional[ColumnVector] = None

    for step, (x, y) in enumerate(zip(inputs, desired)):
        out = network.calculate_all_activation_values(x).copy()
        if diff is None:
            diff = ColumnVector.new_with_elements(len(out), 0.0)
        out.sub_into(y, diff)
        err = diff.magnitude_squared()

        outputs.append(out)
        errors.append(err)
        running = tracker.update(err)

        if on_pass is not None:
            on_pass({
                "step": step,
                "error": err,
                "error_ema": running["ema"],
                "error_mean": running["mean"],
                "output_mean": out.average(),
                "output_min": float(out.data.min()),
                "output_max": float(out.data.max()),
            })

    return EvalResult(
        loss=mean_square_error(outputs, desired),
        outputs=tuple(outputs),
        errors=tuple(errors),
    )


def evaluate_with_config(
    network: NetworkLike,
    inputs: Sequence[ColumnVector],
    desired: Sequence[ColumnVector],
    cfg: "NetworkConfig",
) -> EvalResult:
    """evaluate() with stats and optional CSV logging driven by a NetworkConfig."""
    if cfg.log_path is None:
        return evaluate(network, inputs, desired, ema_alpha=cfg.ema_alpha, window=cfg.window)

    with CSVLogger(cfg.log_path, fieldnames=PASS_KEYS) as logger:
        result = evaluate(
            network, inputs, desired,
            on_pass=make_pass_logger(logger, cfg.log_every),
            ema_alpha=cfg.ema_alpha,
            window=cfg.window,
        )
        logger.flush()
    return result
