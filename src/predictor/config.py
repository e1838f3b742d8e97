"""
Deployment config documents.

The JSON shape matches what ``create2-predictor implementations`` prints,
extended with the deployment parameters:

    {
      "summonerAddress": "0x...",
      "molochImplementation": "0x...",
      "sharesImplementation": "0x...",
      "badgesImplementation": "0x...",
      "lootImplementation": "0x...",
      "initHolders": ["0x..."],
      "initShares": ["1000000000000000000"],
      "customSalt": "0x00...00"
    }
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from predictor.core.errors import ValidationError
from predictor.core.types import DeploymentConfig


logger = logging.getLogger(__name__)

REQUIRED_KEYS = (
    "summonerAddress",
    "molochImplementation",
    "sharesImplementation",
    "badgesImplementation",
    "lootImplementation",
)


def config_from_dict(data: dict[str, Any]) -> DeploymentConfig:
    """Parse a config document. Missing ``initHolders``/``initShares`` mean empty lists."""
    if not isinstance(data, dict):
        raise ValidationError("Config document must be a JSON object")
    for key in REQUIRED_KEYS:
        if key not in data:
            raise ValidationError(f"Missing config key: {key}")

    holders = data.get("initHolders", [])
    shares = data.get("initShares", [])
    if not isinstance(holders, list) or not isinstance(shares, list):
        raise ValidationError("initHolders and initShares must be lists")

    return DeploymentConfig.from_hex(
        summoner=data["summonerAddress"],
        dao_implementation=data["molochImplementation"],
        shares_implementation=data["sharesImplementation"],
        badges_implementation=data["badgesImplementation"],
        loot_implementation=data["lootImplementation"],
        init_holders=holders,
        init_shares=shares,
        custom_salt=data.get("customSalt"),
    )


def load_config(path: str | Path) -> DeploymentConfig:
    path = Path(path)
    with open(path) as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise ValidationError(f"Invalid JSON in {path}: {exc}") from exc
    logger.info("Loaded deployment config from %s", path)
    return config_from_dict(data)
