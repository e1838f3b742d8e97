"""
Address prediction for a summoner deployment.

A summoner deploys the DAO as a minimal proxy with CREATE2; during
initialisation the DAO deploys its shares, badges and loot tokens the
same way, using its own address as deployer and as salt:

  1. dao   = create2(summoner, keccak256(abi.encode(holders, shares, salt)), proxy(daoImpl))
  2. token = create2(dao, bytes32(bytes20(dao)), proxy(tokenImpl))
"""

from __future__ import annotations

import logging
from typing import Optional

from predictor.core.create2 import compute_create2_address
from predictor.core.errors import EncodingError, ValidationError
from predictor.core.proxy import build_proxy_bytecode
from predictor.core.salt import compute_dao_salt, compute_token_salt
from predictor.core.types import DeploymentConfig, PredictedAddresses


logger = logging.getLogger(__name__)


def predict_token_addresses(
    dao: bytes,
    shares_implementation: bytes,
    badges_implementation: bytes,
    loot_implementation: bytes,
) -> tuple[bytes, bytes, bytes]:
    """Predict the (shares, badges, loot) clone addresses deployed by ``dao``."""
    token_salt = compute_token_salt(dao)
    return (
        compute_create2_address(dao, token_salt, build_proxy_bytecode(shares_implementation)),
        compute_create2_address(dao, token_salt, build_proxy_bytecode(badges_implementation)),
        compute_create2_address(dao, token_salt, build_proxy_bytecode(loot_implementation)),
    )


def predict_all_addresses(config: DeploymentConfig) -> PredictedAddresses:
    """
    Predict the DAO and its three token addresses.

    Raises:
        ValidationError: If holders and shares differ in length or any
            value has the wrong width
        EncodingError: If the salt parameters cannot be ABI-encoded
    """
    if len(config.init_holders) != len(config.init_shares):
        raise ValidationError("initHolders and initShares must have same length")

    dao_bytecode = build_proxy_bytecode(config.dao_implementation)
    dao_salt = compute_dao_salt(config.init_holders, config.init_shares, config.custom_salt)
    dao = compute_create2_address(config.summoner, dao_salt, dao_bytecode)
    logger.debug("DAO salt 0x%s -> DAO 0x%s", dao_salt.hex(), dao.hex())

    shares, badges, loot = predict_token_addresses(
        dao,
        config.shares_implementation,
        config.badges_implementation,
        config.loot_implementation,
    )
    logger.debug("Tokens: shares=0x%s badges=0x%s loot=0x%s", shares.hex(), badges.hex(), loot.hex())

    return PredictedAddresses(dao=dao, shares=shares, badges=badges, loot=loot)


def try_predict_all_addresses(config: Optional[DeploymentConfig]) -> Optional[PredictedAddresses]:
    """Like :func:`predict_all_addresses`, but logs failures and returns None."""
    if config is None:
        return None

    if len(config.init_holders) != len(config.init_shares):
        logger.error("initHolders and initShares must have same length")
        return None

    try:
        return predict_all_addresses(config)
    except (ValidationError, EncodingError) as e:
        logger.error("Error predicting addresses: %s", e)
        return None
