from flask import render_template, request

from .app import app, db
from .errors import AlreadyBannedError, InvalidArgumentError, NotFoundError
from .models import VoiceBanLog
from .registry import get_registry


def request_data():
	"""Returns the request fields, sent either as a form or as a JSON object."""
	obj = request.get_json(silent=True)
	if isinstance(obj, dict):
		return obj
	return request.values


def get_player_id(data):
	player_id = data.get("player_id")
	#### Compatibility code ####
	# Game clients send the PlayFab ID under its own name
	if player_id is None:
		player_id = data.get("playfabId")
	#### End compatibility code ####
	return player_id


@app.errorhandler(InvalidArgumentError)
def invalid_argument(e):
	return {"error": str(e)}, 400


@app.errorhandler(AlreadyBannedError)
def already_banned(e):
	return {"error": str(e), "expires_at": e.expires_at.isoformat()}, 409


@app.errorhandler(NotFoundError)
def not_found(e):
	return {"error": str(e)}, 404


@app.errorhandler(OSError)
def save_failed(e):
	app.logger.error("%s %s failed: %s", request.method, request.path, e)
	if request.endpoint in ("ban", "revoke"):
		return {"error": "Ban list could not be saved."}, 500
	return {"error": "Internal server error."}, 500


@app.route("/")
def index():
	return render_template("dashboard.html",
		bans=get_registry().list_active(),
		voice_logs=VoiceBanLog.recent(5))


@app.post("/ban")
def ban():
	data = request_data()

	duration = data.get("duration")
	if isinstance(duration, str):
		try:
			duration = int(duration)
		except ValueError:
			raise InvalidArgumentError("Field 'duration' must be an integer number of minutes.")
	if not isinstance(duration, int):
		raise InvalidArgumentError("Field 'duration' must be an integer number of minutes.")

	record = get_registry().ban(get_player_id(data), data.get("reason"), duration)
	return record.as_json()


@app.route("/check/<path:player_id>")
def check(player_id):
	return get_registry().check(player_id).as_json()


@app.post("/revoke")
def revoke():
	player_id = get_player_id(request_data())
	if not player_id:
		raise InvalidArgumentError("Field 'player_id' is missing.")

	get_registry().revoke(player_id)
	return {"revoked": player_id}


@app.route("/list")
def ban_list():
	bans = get_registry().list_active()
	return {
		"total": len(bans),
		"list": [record.as_json() for record in bans],
	}


@app.post("/voice-log")
def voice_log():
	data = request_data()

	entry = VoiceBanLog.record(data.get("name"), get_player_id(data), data.get("reason"))
	db.session.commit()

	app.logger.info("%s", entry.as_line())
	return {"logged": True}


@app.route("/voice-log")
def voice_log_list():
	entries = VoiceBanLog.recent()
	return {
		"total": len(entries),
		"list": [entry.as_json() for entry in entries],
	}
