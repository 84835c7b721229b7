"""Configuration and constants"""
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(override=True)

# Storage settings
KEYRING_SERVICE = os.getenv("INSTACLONE_KEYRING_SERVICE", "instaclone")
SESSION_KEY = "currentUser"
# Size of each chunk in bytes when splitting large session values for keyring.
SESSION_CHUNK_SIZE = 1000

# Upload limits
MAX_UPLOAD_BYTES = int(os.getenv("INSTACLONE_MAX_UPLOAD_BYTES", str(5 * 1024 * 1024)))

# Simulated backend latency in seconds, applied to login/signup/fetch calls
SIMULATED_LATENCY = float(os.getenv("INSTACLONE_LATENCY", "0"))

# Debugging
DEBUG = bool(os.getenv("INSTACLONE_DEBUG"))
DEBUG_LOG_FILE = Path.home() / ".instaclone_debug.log"
