import os
import tempfile
from datetime import datetime, timedelta, timezone

import pytest

# Must be set before the app is imported, it reads its configuration once.
_tmpdir = tempfile.mkdtemp(prefix="ban_registry_test_")
os.environ["BAN_REGISTRY_BAN_FILE"] = os.path.join(_tmpdir, "bans.json")
os.environ["BAN_REGISTRY_SQLALCHEMY_DATABASE_URI"] = "sqlite://"
os.environ["BAN_REGISTRY_TESTING"] = "true"

from ban_registry.app import app, db  # noqa: E402
from ban_registry import commands, views  # noqa: E402,F401
from ban_registry.registry import BanRegistry  # noqa: E402
from ban_registry.store import BanStore  # noqa: E402


T0 = datetime(2026, 1, 1, tzinfo=timezone.utc)


class FakeClock:
	def __init__(self, now=T0):
		self.current = now

	def now(self):
		return self.current

	def advance(self, **kwargs):
		self.current += timedelta(**kwargs)


@pytest.fixture
def clock():
	return FakeClock()


@pytest.fixture
def store(tmp_path):
	return BanStore(str(tmp_path / "bans.json"))


@pytest.fixture
def registry(store, clock):
	return BanRegistry(store, clock)


@pytest.fixture
def app_registry(registry, monkeypatch):
	monkeypatch.setitem(app.extensions, "ban_registry", registry)
	return registry


@pytest.fixture
def client(app_registry):
	app.config["TESTING"] = True
	with app.app_context():
		db.create_all()
		yield app.test_client()
		db.session.remove()
		db.drop_all()


@pytest.fixture
def runner(app_registry):
	return app.test_cli_runner()
