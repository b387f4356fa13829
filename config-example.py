# Copy this file to config.py and change the settings you need.
# Defaults for every setting are in ban_registry/config.py.
# Any setting can also be overridden with an environment variable
# prefixed with BAN_REGISTRY_, e.g. BAN_REGISTRY_PORT=8000.

from datetime import timedelta

# Enables detailed tracebacks and an interactive Python console on errors.
# Never use in production!
# Also enables the reloader, the expired ban sweeper then only runs in the
# reloader's child process.
#DEBUG = True

# Address for development server to listen on
HOST = "0.0.0.0"

# Port for development server to listen on
PORT = 3000

# File to store the JSON ban list in.
BAN_FILE = "bans.json"

# How often expired bans are removed from the ban list file.
#SWEEP_INTERVAL = timedelta(minutes=5)

# Number of voice ban log entries to keep.
#VOICE_LOG_LIMIT = 1000

# Database to use to store the voice ban log
#SQLALCHEMY_DATABASE_URI = "postgresql:///ban_registry"

