from rating_refresh.exceptions import MimicApiError
from rating_refresh.mimic.resources.base import BaseResource


class UsersResource(BaseResource):
    """Wallet login: nonce, signature authentication and API key retrieval."""

    async def request_nonce(self, address: str) -> str:
        data = await self._post("users/nonce", {"address": address})
        return self._require(data, "nonce")

    async def authenticate(self, address: str, signature: str) -> str:
        """Exchange a signed nonce for an authentication token."""
        data = await self._post("users/authenticate", {"address": address, "signature": signature})
        return self._require(data, "token")

    async def get_api_key(self, token: str) -> str:
        data = await self._get("users/api-key", headers={"x-auth-token": token})
        return self._require(data, "apiKey")

    @staticmethod
    def _require(data, key: str) -> str:
        if not isinstance(data, dict) or not data.get(key):
            raise MimicApiError(f"Missing '{key}' in Mimic response: {data}")
        return str(data[key])
