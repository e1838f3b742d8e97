"""Predict summoner (DAO) and token clone addresses before deployment."""

from predictor.core import DeploymentConfig, PredictedAddresses, ValidationError, EncodingError
from predictor.predict import (
    predict_all_addresses,
    predict_token_addresses,
    try_predict_all_addresses,
)

__all__ = [
    "DeploymentConfig",
    "PredictedAddresses",
    "ValidationError",
    "EncodingError",
    "predict_all_addresses",
    "predict_token_addresses",
    "try_predict_all_addresses",
]
