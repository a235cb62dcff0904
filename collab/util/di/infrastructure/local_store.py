"""Local capability store providers."""

from dishka import Scope, provide

from collab.config import SharingSettings
from collab.domain.repository import LocalShareStore
from collab.persistence.local.json_store import JsonFileLocalShareStore
from collab.util.di.base import ProviderBase


class LocalStoreProvider(ProviderBase):
    """Local store component base."""

    __mock_component__ = "local_store"


class ProdLocalStoreProvider(LocalStoreProvider):
    """Production local store provider backed by a JSON file."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_local_share_store(
        self, sharing_settings: SharingSettings
    ) -> LocalShareStore:
        """Provide the JSON file store at ``sharing.local_store_path``."""
        return JsonFileLocalShareStore(sharing_settings.local_store_path)
