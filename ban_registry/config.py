from datetime import timedelta

# Enables detailed tracebacks and an interactive Python console on errors.
# Never use in production!
DEBUG = False

# Address for development server to listen on
HOST = "127.0.0.1"
# Port for development server to listen on
PORT = 3000

# File to store the JSON ban list in.
# Relative paths are resolved against the project root.
BAN_FILE = "bans.json"

# How often expired bans are removed from the ban list file.
# Expired bans stop applying immediately, this only bounds the file size.
SWEEP_INTERVAL = timedelta(minutes=1)

# Number of voice ban log entries to keep.  Older entries are deleted.
VOICE_LOG_LIMIT = 1000

# Database to use to store the voice ban log
SQLALCHEMY_DATABASE_URI = "sqlite:///ban_registry.sqlite"

