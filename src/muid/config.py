# Shared muid constants

from pathlib import Path

# --- Hashing ---
# Digests are SHA-256 hex digests truncated to this many characters (128 bits).
DIGEST_LENGTH = 32
# Candidate keys are this many random bytes, hex encoded.
KEY_BYTES = 16

# --- Mining ---
DEFAULT_DIFFICULTY = 8
DEFAULT_KEY_DIFFICULTY = 6
# Mining at or above this difficulty can take days or weeks.
WARN_DIFFICULTY = 13

# --- Corpus ---
# These paths can be monkeypatched in tests to redirect loading.
CORPUS_PATH = Path(__file__).resolve().parent / "data" / "animals.json"
CORPUS_ENV = "MUID_CORPUS"

# --- Logging ---
LOG_LEVEL_ENV = "MUID_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
