"""Core types, constants and derivation primitives."""

from .types import (
    DaoTokens,
    DeploymentConfig,
    DeploymentRecord,
    Implementations,
    PredictedAddresses,
)
from .constants import ZERO_ADDRESS, ZERO_SALT, PROXY_PREFIX, PROXY_SUFFIX, PROXY_BYTECODE_LENGTH
from .crypto import keccak256
from .errors import EncodingError, PredictorError, ValidationError
from .proxy import build_proxy_bytecode, proxy_init_code_hash
from .create2 import compute_create2_address, compute_create2_address_with_code_hash
from .salt import compute_dao_salt, compute_token_salt

__all__ = [
    "DaoTokens",
    "DeploymentConfig",
    "DeploymentRecord",
    "Implementations",
    "PredictedAddresses",
    "ZERO_ADDRESS",
    "ZERO_SALT",
    "PROXY_PREFIX",
    "PROXY_SUFFIX",
    "PROXY_BYTECODE_LENGTH",
    "keccak256",
    "EncodingError",
    "PredictorError",
    "ValidationError",
    "build_proxy_bytecode",
    "proxy_init_code_hash",
    "compute_create2_address",
    "compute_create2_address_with_code_hash",
    "compute_dao_salt",
    "compute_token_salt",
]
