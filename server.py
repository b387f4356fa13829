#!/usr/bin/env python3
import atexit
import os
from datetime import timedelta

from ban_registry.app import app
from ban_registry import commands, views
from ban_registry.registry import get_registry
from ban_registry.scheduler import SweepScheduler


def should_start_sweeper():
	if app.testing:
		return False
	# With the reloader enabled the parent process only watches files,
	# the child started with WERKZEUG_RUN_MAIN serves requests.
	if app.debug and os.environ.get("WERKZEUG_RUN_MAIN") != "true":
		return False
	return True


def start_sweeper():
	interval = app.config["SWEEP_INTERVAL"]
	# Environment overrides arrive as a number of seconds
	if not isinstance(interval, timedelta):
		interval = timedelta(seconds=interval)

	sweeper = SweepScheduler(get_registry(), interval)
	sweeper.start()

	def shutdown():
		sweeper.stop()
		get_registry().sweep()

	atexit.register(shutdown)
	return sweeper


# Globals / Startup

sweeper = start_sweeper() if should_start_sweeper() else None

if __name__ == "__main__":
	app.run(host=app.config["HOST"], port=app.config["PORT"])
