from threading import Event, Thread

from .app import app


class SweepScheduler(Thread):
	"""Sweeps expired bans at startup and then once every `interval`."""

	def __init__(self, registry, interval):
		Thread.__init__(self, name="BanSweepThread", daemon=True)
		self.registry = registry
		self.interval = interval
		self.stopping = Event()

	def run(self):
		while True:
			self.tick()
			if self.stopping.wait(self.interval.total_seconds()):
				break

	def tick(self):
		try:
			self.registry.sweep()
		except Exception:
			# Keep the schedule running, the next tick may succeed
			app.logger.exception("Sweeping expired bans failed.")

	def stop(self):
		"""Stops scheduling, waiting for a running sweep to finish."""
		self.stopping.set()
		if self.is_alive():
			self.join()
