"""Wire-format constants and defaults."""

import re

# --- Token layout ---

VERSION = 0x80
BLOCK_SIZE = 16
KEY_SIZE = 32
SUBKEY_SIZE = KEY_SIZE // 2
IV_SIZE = 16
MAC_SIZE = 32
TIMESTAMP_SIZE = 8

HEADER_SIZE = 1 + TIMESTAMP_SIZE + IV_SIZE
OVERHEAD = HEADER_SIZE + MAC_SIZE  # 57
MIN_TOKEN_SIZE = OVERHEAD + 1

MAX_TIMESTAMP = 2**64 - 1

# --- Verification policy ---

MAX_CLOCK_DRIFT_SECONDS = 60
DEFAULT_TTL_SECONDS = 60

# --- Encoding ---

# URL-safe base64 alphabet with optional trailing padding
URLSAFE_B64_PATTERN = re.compile(r"[A-Za-z0-9_-]*={0,2}")

# --- Environment ---

SECRET_ENV_VAR = "FERNET_SECRET"
SERVICE_NAME = "fernetex"
