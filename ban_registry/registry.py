import math
import os
from datetime import timedelta
from threading import Lock, RLock

from .app import app
from .clock import UTCClock
from .errors import AlreadyBannedError, CorruptStoreError, InvalidArgumentError, NotFoundError
from .models import BanRecord, BanStatus
from .store import BanStore


def check_text(name, value):
	if not isinstance(value, str) or not value.strip():
		raise InvalidArgumentError(f"Field '{name}' must be a non-empty string.")


class BanRegistry:
	"""Owns the set of active bans.

	Mutations (ban, revoke, sweep) are serialized by a lock held across the
	whole load-modify-save cycle.  Each mutation builds a new mapping, saves it,
	and only then replaces `self.bans`, so readers never need the lock and a
	failed save leaves the registry as it was.

	Expiry is applied lazily by every query, the sweep only removes expired
	records from the persisted list.
	"""

	def __init__(self, store, clock=None):
		self.store = store
		self.clock = clock or UTCClock()
		self.lock = RLock()
		self.bans = {}
		self.load()

	def load(self):
		with self.lock:
			try:
				records = self.store.load()
			except CorruptStoreError as e:
				app.logger.warning("Ban list is unreadable, starting with no bans: %s", e)
				records = []
			self.bans = {record.player_id: record for record in records}

	def _commit(self, bans):
		self.store.save(list(bans.values()))
		self.bans = bans

	def ban(self, player_id, reason, duration):
		check_text("player_id", player_id)
		check_text("reason", reason)
		if isinstance(duration, bool) or not isinstance(duration, (int, float)):
			raise InvalidArgumentError("Field 'duration' must be a number of minutes.")
		if isinstance(duration, float) and not math.isfinite(duration):
			raise InvalidArgumentError("Field 'duration' must be finite.")
		if duration <= 0:
			raise InvalidArgumentError("Field 'duration' must be positive.")

		with self.lock:
			now = self.clock.now()
			try:
				expires_at = now + timedelta(minutes=duration)
			except (OverflowError, ValueError):
				raise InvalidArgumentError("Field 'duration' is too large.") from None

			bans = dict(self.bans)
			old = bans.pop(player_id, None)
			if old is not None and old.is_active(now):
				raise AlreadyBannedError(player_id, old.expires_at)

			record = BanRecord(player_id, reason, expires_at)
			bans[player_id] = record
			self._commit(bans)

		app.logger.info("Banned %r until %s: %s", player_id, expires_at.isoformat(), reason)
		return record

	def revoke(self, player_id):
		with self.lock:
			record = self.bans.get(player_id)
			if record is None or not record.is_active(self.clock.now()):
				raise NotFoundError(player_id)

			bans = dict(self.bans)
			del bans[player_id]
			self._commit(bans)

		app.logger.info("Revoked ban of %r.", player_id)

	def check(self, player_id):
		record = self.bans.get(player_id)
		if record is None or not record.is_active(self.clock.now()):
			return BanStatus(banned=False)
		return BanStatus(banned=True, reason=record.reason, expires_at=record.expires_at)

	def list_active(self):
		now = self.clock.now()
		return [record for record in self.bans.values() if record.is_active(now)]

	def sweep(self):
		with self.lock:
			now = self.clock.now()
			active = {k: r for k, r in self.bans.items() if r.is_active(now)}
			removed = len(self.bans) - len(active)
			if removed:
				self._commit(active)

		if removed:
			app.logger.info("Removed %d expired ban(s).", removed)
		return removed


_registry_lock = Lock()


def get_registry():
	"""Returns the application's registry, creating it on first use."""
	with _registry_lock:
		registry = app.extensions.get("ban_registry")
		if registry is None:
			path = os.path.join(app.root_path, "..", app.config["BAN_FILE"])
			registry = BanRegistry(BanStore(os.path.normpath(path), pretty=app.config["DEBUG"]))
			app.extensions["ban_registry"] = registry
		return registry
