from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from .app import app, db


def parse_timestamp(value):
	"""Parses an ISO 8601 timestamp, treating naive values as UTC."""
	ts = datetime.fromisoformat(value)
	if ts.tzinfo is None:
		ts = ts.replace(tzinfo=timezone.utc)
	return ts


@dataclass(frozen=True)
class BanRecord:
	"""One player's active suspension.  Never modified after creation."""
	player_id: str
	reason: str
	expires_at: datetime

	def is_active(self, now):
		return self.expires_at > now

	def as_json(self):
		return {
			"player_id": self.player_id,
			"reason": self.reason,
			"expires_at": self.expires_at.isoformat(),
		}

	@staticmethod
	def from_json(obj):
		return BanRecord(
			player_id=obj["player_id"],
			reason=obj["reason"],
			expires_at=parse_timestamp(obj["expires_at"]),
		)


@dataclass(frozen=True)
class BanStatus:
	banned: bool
	reason: Optional[str] = None
	expires_at: Optional[datetime] = None

	def as_json(self):
		obj = {"banned": self.banned}
		if self.banned:
			obj["reason"] = self.reason
			obj["expires_at"] = self.expires_at.isoformat()
		return obj


def utcnow():
	return datetime.now(timezone.utc)


class VoiceBanLog(db.Model):
	__tablename__ = "voice_ban_log"

	id = db.Column(db.Integer, primary_key=True)

	# Display name reported by the game client
	name = db.Column(db.String, nullable=False, default="Unknown")

	# Player that was voice banned, if the client knew it
	player_id = db.Column(db.String, nullable=True, index=True)

	reason = db.Column(db.String, nullable=False, default="No reason")

	created_at = db.Column(db.DateTime(timezone=True), default=utcnow, nullable=False)

	@staticmethod
	def record(name, player_id, reason):
		entry = VoiceBanLog(
			name=name or "Unknown",
			player_id=player_id or None,
			reason=reason or "No reason",
			created_at=utcnow(),
		)
		db.session.add(entry)
		db.session.flush()
		VoiceBanLog.trim(app.config["VOICE_LOG_LIMIT"])
		return entry

	@staticmethod
	def trim(limit):
		"""Deletes all but the newest `limit` entries."""
		cutoff = db.session.query(VoiceBanLog.id) \
			.order_by(VoiceBanLog.id.desc()) \
			.offset(limit) \
			.first()
		if cutoff is None:
			return 0
		return VoiceBanLog.query.filter(VoiceBanLog.id <= cutoff.id) \
			.delete(synchronize_session=False)

	@staticmethod
	def recent(limit=None):
		query = VoiceBanLog.query.order_by(VoiceBanLog.id.desc())
		if limit is not None:
			query = query.limit(limit)
		return query.all()

	def as_line(self):
		return "[%s] %s (%s): %s" % (
			self.created_at.strftime("%Y-%m-%dT%H:%M:%SZ"),
			self.name, self.player_id or "N/A", self.reason)

	def as_json(self):
		obj = {
			"name": self.name,
			"reason": self.reason,
			"created_at": self.created_at.strftime("%Y-%m-%dT%H:%M:%SZ"),
		}
		if self.player_id is not None:
			obj["player_id"] = self.player_id
		return obj
