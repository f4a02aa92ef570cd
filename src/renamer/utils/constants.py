"""
Constants and configuration settings for the renaming tools.

This module contains the constants shared by the media renamer and the file
renamer. It includes accepted video extensions, status codes used in per-file
results, formatting widths for generated tokens, and environment-driven
defaults for the operation log and console verbosity.
"""

import os

from dotenv import load_dotenv

load_dotenv()

# Accepted video file extensions (media mode)
VIDEO_EXTENSIONS = {".mp4", ".mkv", ".avi", ".mov", ".wmv", ".flv", ".webm", ".m4v"}

# Name used when sanitization leaves nothing behind
FALLBACK_NAME = "video"

# Generated token widths
COUNTER_WIDTH = 3
RANDOM_TOKEN_LENGTH = 4
HASH_TOKEN_LENGTH = 8

# Timestamp formats
LOG_TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"
DATE_FORMAT = "%Y%m%d"
DATETIME_FORMAT = "%Y%m%d_%H%M%S"

# Environment configuration
DEFAULT_LOG_FILE = os.getenv("RENAMER_LOG_FILE") or None
DEFAULT_LOG_LEVEL = os.getenv("RENAMER_LOG_LEVEL", "INFO").upper()
BACKUP_SUFFIX = os.getenv("RENAMER_BACKUP_SUFFIX", ".bak")

# Processing status codes
STATUS_OK = "OK"
STATUS_DRY_RUN = "DRY-RUN"
STATUS_SKIP = "SKIP"
STATUS_UNCHANGED = "NO CHANGE"
STATUS_DECLINED = "DECLINED"
STATUS_FAIL = "FAIL"
