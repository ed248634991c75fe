"""Steam component providers."""

from dishka import Scope, provide

from linker.adapter.steam.client import RealSteamOpenIDClient, SteamOpenIDClient
from linker.config import SteamOpenIDSettings
from linker.util.di.base import ProviderBase


class SteamProvider(ProviderBase):
    """Provides the ``SteamOpenIDClient``."""

    __mock_component__ = "steam"


class ProdSteamProvider(SteamProvider):
    """Real Steam OpenID client."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_steam_openid_client(self, steam: SteamOpenIDSettings) -> SteamOpenIDClient:
        return RealSteamOpenIDClient(
            return_to=steam.return_to,
            realm=steam.realm,
            api_key=steam.api_key,
        )
