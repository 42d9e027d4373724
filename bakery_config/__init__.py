"""
bakery_config -- catalog configuration.

Sits above ``bakery_kernel`` and below ``bakery_services``. The kernel
never imports from this package.
"""

from bakery_config.loader import load_config, parse_config
from bakery_config.schema import DEFAULT_BAKERY_NAME, BakeryConfig, PriceDef

__all__ = [
    "BakeryConfig",
    "DEFAULT_BAKERY_NAME",
    "PriceDef",
    "load_config",
    "parse_config",
]
