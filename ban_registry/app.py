import os

from flask import Flask
from flask_sqlalchemy import SQLAlchemy
from flask_migrate import Migrate


app = Flask(__name__)

# Load defaults
app.config.from_pyfile("config.py")

# Load configuration
if os.path.isfile(os.path.join(app.root_path, "..", "config.py")):
	app.config.from_pyfile("../config.py")

# Environment overrides, e.g. BAN_REGISTRY_BAN_FILE=/var/lib/bans.json
app.config.from_prefixed_env("BAN_REGISTRY")

app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = False

db = SQLAlchemy(app)
migrate = Migrate(app, db)

