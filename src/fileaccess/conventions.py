"""FileAccess Conventions

Fixed names and spellings the package relies on. These values are NOT
configurable; the tunables live in schema.py and the optional config file.
"""

import os

# --- Text ---
# Strings handed to write/append are encoded with this codec and nothing else.
TEXT_ENCODING = "utf-8"

# --- Line terminators ---
# Keys are the values accepted by FileAccessConfig.newline.
LINE_TERMINATORS = {
    "platform": os.linesep,
    "lf": "\n",
    "crlf": "\r\n",
}

# --- Configuration ---
FILEACCESS_HOME = "~/.fileaccess"
CONFIG_FILENAME = "config.yaml"
# Full path: ~/.fileaccess/config.yaml

# --- Logging ---
LOG_MAX_BYTES = 10 * 1024 * 1024
LOG_BACKUP_COUNT = 3
