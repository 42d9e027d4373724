"""
Configuration Loader (``bakery_config.loader``).

Responsibility
--------------
Loads a YAML document and parses it into a ``BakeryConfig``.

Expected document shape::

    name: Corner Bakery
    prices:
      cake: 20.146
      donut: 1.5

Both keys are optional. ``name`` defaults to ``"Eliots Bakery"``.

Failure modes
-------------
* Missing YAML file  -> ``FileNotFoundError`` propagates.
* Malformed YAML  -> ``yaml.YAMLError`` propagates.
* Wrong shapes or invalid prices  -> ``ValueError``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from bakery_config.schema import DEFAULT_BAKERY_NAME, BakeryConfig, PriceDef
from bakery_kernel.domain.values import to_price
from bakery_kernel.exceptions import InvalidArgumentError
from bakery_kernel.logging_config import get_logger

logger = get_logger("config.loader")


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a single YAML file and return its contents as a dict.

    Raises:
        FileNotFoundError: if the file does not exist.
        yaml.YAMLError: if the file contains invalid YAML.
    """
    with open(path) as f:
        return yaml.safe_load(f) or {}


def parse_prices(data: Any) -> tuple[PriceDef, ...]:
    """Parse the ``prices`` mapping into rounded PriceDefs."""
    if data is None:
        return ()
    if not isinstance(data, dict):
        raise ValueError(f"'prices' must be a mapping, got {type(data).__name__}")

    prices: list[PriceDef] = []
    for good_type, amount in data.items():
        try:
            prices.append(PriceDef(good_type=str(good_type), amount=to_price(amount)))
        except InvalidArgumentError as e:
            raise ValueError(f"Invalid price for {good_type!r}: {e}") from e
    return tuple(prices)


def parse_config(data: dict[str, Any]) -> BakeryConfig:
    """
    Parse a ``BakeryConfig`` from a dict.

    Raises:
        ValueError: if the document is not a mapping, the name is not a
            non-empty string, or a price is invalid.
    """
    if not isinstance(data, dict):
        raise ValueError(f"Bakery config must be a mapping, got {type(data).__name__}")

    name = data.get("name", DEFAULT_BAKERY_NAME)
    if not isinstance(name, str) or not name.strip():
        raise ValueError(f"'name' must be a non-empty string, got {name!r}")

    return BakeryConfig(name=name, prices=parse_prices(data.get("prices")))


def load_config(path: Path | str) -> BakeryConfig:
    """Load and parse a bakery configuration file."""
    path = Path(path)
    config = parse_config(load_yaml_file(path))
    logger.info("bakery_config_loaded", extra={
        "path": str(path),
        "bakery_name": config.name,
        "price_count": len(config.prices),
    })
    return config
