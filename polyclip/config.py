"""
polyclip - Global Configuration
All tunable defaults in one place.
"""

from dataclasses import dataclass, field


@dataclass
class PrecisionConfig:
    """Decimal precision used when moving floating paths to the integer domain."""
    # 10**precision is the scale applied to floating coordinates
    default_precision: int = 2

    # Allowed exponent range
    min_precision: int = -8
    max_precision: int = 8


@dataclass
class OffsetConfig:
    """Path offsetting defaults."""
    miter_limit: float = 2.0
    arc_tolerance: float = 0.25


@dataclass
class JitConfig:
    """Numba kernel settings."""
    enabled: bool = True

    # Largest coordinate magnitude the int64 kernels accept.
    # |dx|, |dy| < 2**31, so each product stays below 2**62 and the
    # cross product (a difference of two products) below 2**63.
    max_coordinate: int = 2 ** 30 - 1


@dataclass
class ParseConfig:
    """Path literal parsing."""
    # Only the first N user supplied skip characters are honoured
    max_skip_chars: int = 16


@dataclass
class PolyclipConfig:
    """Master configuration combining all sub-configs."""
    precision: PrecisionConfig = field(default_factory=PrecisionConfig)
    offset: OffsetConfig = field(default_factory=OffsetConfig)
    jit: JitConfig = field(default_factory=JitConfig)
    parse: ParseConfig = field(default_factory=ParseConfig)


# Global configuration instance
CONFIG = PolyclipConfig()


def get_default_precision() -> int:
    """Precision used when a caller does not pass one."""
    return CONFIG.precision.default_precision


def precision_in_range(precision: int) -> bool:
    """True if 10**precision is an allowed scale."""
    return CONFIG.precision.min_precision <= precision <= CONFIG.precision.max_precision
