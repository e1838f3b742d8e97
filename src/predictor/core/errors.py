"""Exceptions raised by the prediction core."""


class PredictorError(Exception):
    pass


class ValidationError(PredictorError, ValueError):
    """Malformed input: wrong length, bad hex, out of range or mismatched lists."""


class EncodingError(PredictorError):
    """A value could not be ABI-encoded under its declared type."""
