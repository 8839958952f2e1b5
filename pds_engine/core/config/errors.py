# ========================
# file: pds_engine/core/config/errors.py
# ========================
class SamplerError(Exception):
    """Base error for the sampler package."""


class InvalidConfiguration(SamplerError, ValueError):
    """Raised when sampler inputs or a config dict fail validation."""


class NotFoundError(SamplerError):
    """Raised when a preset id or path cannot be resolved."""


class SamplingTimeout(SamplerError):
    """Raised when a run exceeds its time budget.

    The points accepted before the deadline are kept on ``points``.
    """

    def __init__(self, message: str, points=None):
        super().__init__(message)
        self.points = list(points or [])
