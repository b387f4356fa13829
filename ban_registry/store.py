import json
import os

from .errors import CorruptStoreError
from .models import BanRecord


class BanStore:
	"""Reads and writes the full ban list as a JSON array.

	The store knows nothing about expiry, it only persists what it's given.
	"""

	def __init__(self, path, pretty=False):
		self.path = path
		self.pretty = pretty

	def load(self):
		try:
			with open(self.path, "r") as fd:
				data = json.load(fd)
		except FileNotFoundError:
			return []
		except (json.JSONDecodeError, UnicodeDecodeError) as e:
			raise CorruptStoreError(f"Unable to decode {self.path}: {e}") from e

		if not isinstance(data, list):
			raise CorruptStoreError(f"{self.path} does not contain a JSON array.")

		records = []
		for i, obj in enumerate(data):
			try:
				record = BanRecord.from_json(obj)
			except (KeyError, TypeError, ValueError) as e:
				raise CorruptStoreError(f"Entry {i} in {self.path} is invalid: {e!r}") from e
			if not isinstance(record.player_id, str) or not isinstance(record.reason, str):
				raise CorruptStoreError(f"Entry {i} in {self.path} has incorrect field types.")
			records.append(record)
		return records

	def save(self, records):
		# Write to temporary file, then do an atomic replace so that readers
		# never see a truncated file.
		tmp_path = self.path + "~"
		try:
			with open(tmp_path, "w") as fd:
				json.dump([record.as_json() for record in records],
					fd,
					indent="\t" if self.pretty else None,
					separators=(',', ': ') if self.pretty else (',', ':')
				)
			os.replace(tmp_path, self.path)
		except Exception:
			try:
				os.remove(tmp_path)
			except FileNotFoundError:
				pass
			raise
