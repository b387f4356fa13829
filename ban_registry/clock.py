from datetime import datetime, timezone


class UTCClock:
	"""Wall clock returning timezone-aware UTC datetimes."""

	def now(self):
		return datetime.now(timezone.utc)
