import json
import os
from datetime import datetime, timezone

import pytest

from ban_registry.errors import CorruptStoreError
from ban_registry.models import BanRecord
from ban_registry.store import BanStore


def write(store, text):
	with open(store.path, "w") as fd:
		fd.write(text)


def test_missing_file_is_empty(store):
	assert store.load() == []


def test_save_then_load_keeps_order(store):
	records = [
		BanRecord("b", "spam", datetime(2026, 1, 2, tzinfo=timezone.utc)),
		BanRecord("a", "cheating", datetime(2026, 1, 1, 12, tzinfo=timezone.utc)),
	]
	store.save(records)
	assert store.load() == records


def test_file_is_array_of_records(store):
	store.save([BanRecord("p1", "cheating", datetime(2026, 1, 1, tzinfo=timezone.utc))])
	with open(store.path) as fd:
		data = json.load(fd)
	assert data == [{
		"player_id": "p1",
		"reason": "cheating",
		"expires_at": "2026-01-01T00:00:00+00:00",
	}]


def test_save_leaves_no_temporary_file(store):
	store.save([])
	assert not os.path.exists(store.path + "~")


def test_naive_timestamps_are_utc(store):
	write(store, '[{"player_id": "p1", "reason": "x", "expires_at": "2026-01-01T00:00:00"}]')
	record, = store.load()
	assert record.expires_at == datetime(2026, 1, 1, tzinfo=timezone.utc)


@pytest.mark.parametrize("text", [
	"{not json",
	'{"list": []}',
	'[{"player_id": "p1", "reason": "x"}]',
	'[{"player_id": "p1", "reason": "x", "expires_at": "tomorrow"}]',
	'[{"player_id": 5, "reason": "x", "expires_at": "2026-01-01T00:00:00"}]',
	'["p1"]',
])
def test_unparseable_file_is_corrupt(store, text):
	write(store, text)
	with pytest.raises(CorruptStoreError):
		store.load()


def test_save_to_missing_directory_raises(tmp_path):
	store = BanStore(str(tmp_path / "missing" / "bans.json"))
	with pytest.raises(OSError):
		store.save([])


def test_failed_save_removes_temporary_file(store, monkeypatch):
	store.save([BanRecord("p1", "cheating", datetime(2026, 1, 1, tzinfo=timezone.utc))])

	def fail(src, dst):
		raise OSError("disk full")
	monkeypatch.setattr(os, "replace", fail)

	with pytest.raises(OSError):
		store.save([])
	assert not os.path.exists(store.path + "~")
	monkeypatch.undo()
	assert [r.player_id for r in store.load()] == ["p1"]
