from datetime import timedelta
from threading import Event, Thread

from ban_registry.scheduler import SweepScheduler


class StubRegistry:
	def __init__(self, sweep):
		self.sweep = sweep


def test_sweeps_at_startup():
	swept = Event()
	calls = []

	def sweep():
		calls.append(1)
		swept.set()
		return 0

	scheduler = SweepScheduler(StubRegistry(sweep), timedelta(hours=1))
	scheduler.start()
	assert swept.wait(5)
	scheduler.stop()

	assert not scheduler.is_alive()
	assert len(calls) == 1


def test_failed_sweep_keeps_schedule():
	recovered = Event()
	calls = []

	def sweep():
		calls.append(1)
		if len(calls) == 1:
			raise OSError("disk full")
		recovered.set()
		return 0

	scheduler = SweepScheduler(StubRegistry(sweep), timedelta(milliseconds=10))
	scheduler.start()
	assert recovered.wait(5)
	scheduler.stop()

	assert len(calls) >= 2


def test_stop_waits_for_running_sweep():
	started = Event()
	release = Event()
	finished = []

	def sweep():
		started.set()
		release.wait(5)
		finished.append(1)
		return 0

	scheduler = SweepScheduler(StubRegistry(sweep), timedelta(hours=1))
	scheduler.start()
	assert started.wait(5)

	stopper = Thread(target=scheduler.stop)
	stopper.start()
	stopper.join(0.1)
	assert stopper.is_alive()

	release.set()
	stopper.join(5)
	assert not stopper.is_alive()
	assert not scheduler.is_alive()
	assert finished == [1]


def test_sweeps_real_registry(registry, clock):
	registry.ban("p1", "cheating", 1)
	clock.advance(minutes=5)

	scheduler = SweepScheduler(registry, timedelta(hours=1))
	scheduler.start()
	scheduler.stop()

	assert registry.bans == {}
