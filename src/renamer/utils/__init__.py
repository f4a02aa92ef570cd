"""
Constants, errors, logging and filesystem helpers shared by the renaming tools.

This package collects the configuration constants and status codes, the error
hierarchy, the structured logger, and the filename/filesystem utilities that the
media, transform and operation-log packages build on.
"""

from .constants import (
    BACKUP_SUFFIX,
    COUNTER_WIDTH,
    DEFAULT_LOG_FILE,
    DEFAULT_LOG_LEVEL,
    FALLBACK_NAME,
    HASH_TOKEN_LENGTH,
    RANDOM_TOKEN_LENGTH,
    STATUS_DECLINED,
    STATUS_DRY_RUN,
    STATUS_FAIL,
    STATUS_OK,
    STATUS_SKIP,
    STATUS_UNCHANGED,
    VIDEO_EXTENSIONS,
)
from .errors import (
    CollisionError,
    NotFoundError,
    RenamerError,
    StatePreconditionError,
    TransformError,
    UnsupportedTypeError,
    ValidationError,
)
from .logger import LogLevel

__all__ = [
    "VIDEO_EXTENSIONS",
    "FALLBACK_NAME",
    "COUNTER_WIDTH",
    "RANDOM_TOKEN_LENGTH",
    "HASH_TOKEN_LENGTH",
    "DEFAULT_LOG_FILE",
    "DEFAULT_LOG_LEVEL",
    "BACKUP_SUFFIX",
    "STATUS_OK",
    "STATUS_DRY_RUN",
    "STATUS_SKIP",
    "STATUS_UNCHANGED",
    "STATUS_DECLINED",
    "STATUS_FAIL",
    "RenamerError",
    "ValidationError",
    "NotFoundError",
    "UnsupportedTypeError",
    "CollisionError",
    "TransformError",
    "StatePreconditionError",
    "LogLevel",
]
