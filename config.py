# config.py
from dataclasses import dataclass, replace
from typing import Optional, Literal

@dataclass(frozen=True, slots=True)
class NetworkConfig:
    # topology / init
    layer_sizes: tuple[int, ...] = (784, 16, 16, 10)
    fill_value: Optional[float] = None      # constant fill; overrides `init`
    init: Literal["uniform", "normal", "xavier"] = "uniform"
    seed: Optional[int] = None

    # logging
    log_path: Optional[str] = None          # CSV file; None disables logging
    log_every: int = 1                      # passes between logged rows

    # running stats
    ema_alpha: float = 0.1
    window: int = 100

    def with_(self, **kwargs) -> "NetworkConfig":
        """Convenience: clone with updated values"""
        return replace(self, **kwargs)
