class BanRegistryError(Exception):
	"""Base class for errors raised by the ban registry."""


class InvalidArgumentError(BanRegistryError):
	pass


class AlreadyBannedError(BanRegistryError):
	def __init__(self, player_id, expires_at):
		BanRegistryError.__init__(self,
			f"Player {player_id!r} is already banned until {expires_at.isoformat()}.")
		self.player_id = player_id
		self.expires_at = expires_at


class NotFoundError(BanRegistryError):
	def __init__(self, player_id):
		BanRegistryError.__init__(self, f"Player {player_id!r} is not banned.")
		self.player_id = player_id


class CorruptStoreError(BanRegistryError):
	"""The persisted ban list exists but can't be parsed."""
