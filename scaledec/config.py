"""Engine configuration."""

import os
from dataclasses import dataclass


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError as err:
        raise ValueError(f"{name} must be an integer, got '{raw}'") from err


@dataclass(frozen=True)
class DecimalConfig:
    """Centralized configuration for the decimal engine.

    Attributes:
        division_digits: Fractional digits used when a division, power, root,
            logarithm or inverse is called without explicit digits (default: 18)
        root_max_iterations: Cap on Newton-Raphson steps per root (default: 64)
        power_cache_size: Number of cached powers of 5 and 10 (default: 256)
        log_guard_max_rounds: Cap on the logarithm guard-digit fixed point
            search (default: 16)
    """

    division_digits: int = 18
    root_max_iterations: int = 64
    power_cache_size: int = 256
    log_guard_max_rounds: int = 16

    def __post_init__(self) -> None:
        if self.division_digits < 0:
            raise ValueError(f"division_digits must be non-negative, got {self.division_digits}")
        if self.root_max_iterations < 1:
            raise ValueError(f"root_max_iterations must be positive, got {self.root_max_iterations}")
        if self.power_cache_size < 0:
            raise ValueError(f"power_cache_size must be non-negative, got {self.power_cache_size}")
        if self.log_guard_max_rounds < 1:
            raise ValueError(f"log_guard_max_rounds must be positive, got {self.log_guard_max_rounds}")

    @classmethod
    def from_env(cls) -> "DecimalConfig":
        """Build a config from SCALEDEC_* environment variables.

        Unset variables keep their defaults.

        Raises:
            ValueError: If a variable is set but not a valid integer
        """
        defaults = cls()
        return cls(
            division_digits=_env_int("SCALEDEC_DIVISION_DIGITS", defaults.division_digits),
            root_max_iterations=_env_int("SCALEDEC_ROOT_MAX_ITERATIONS", defaults.root_max_iterations),
            power_cache_size=_env_int("SCALEDEC_POWER_CACHE_SIZE", defaults.power_cache_size),
            log_guard_max_rounds=_env_int("SCALEDEC_LOG_GUARD_MAX_ROUNDS", defaults.log_guard_max_rounds),
        )


# Default configuration instance
DEFAULT_CONFIG = DecimalConfig.from_env()
