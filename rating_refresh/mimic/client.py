"""
Mimic client - main entry point for the Mimic task platform API.
"""

from typing import Optional

import logging

import httpx

from rating_refresh.config import MimicConfig
from rating_refresh.exceptions import MimicAuthError
from rating_refresh.mimic.auth.signatures import SignatureGenerator
from rating_refresh.mimic.resources import ConfigsResource, ExecutionsResource, TasksResource, UsersResource


class ResourceManager:
    """Manages all API resources."""

    def __init__(self, config: MimicConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.users = UsersResource(config, transport)
        self.tasks = TasksResource(config, transport)
        self.configs = ConfigsResource(config, transport)
        self.executions = ExecutionsResource(config, transport)


class MimicClient:
    """
    Client for the Mimic task platform.

    Authenticates with an API key, a wallet private key, or both. The private key is
    needed to sign task configurations.
    """

    def __init__(self, config: MimicConfig, transport: Optional[httpx.AsyncBaseTransport] = None):
        """
        Initialize the Mimic client.

        Args:
            config: Mimic API configuration
            transport: Optional httpx transport (used by tests to stub the API)

        Raises:
            MimicAuthError: If neither an API key nor a private key is configured
        """
        self.logger = logging.getLogger("rating_refresh.mimic.client")

        if not config.has_credentials:
            raise MimicAuthError("Either MIMIC_API_KEY or PRIVATE_KEY must be set in .env file")

        if config.api_key:
            self.logger.info("[AUTH] Using API key authentication")
        else:
            self.logger.info("[AUTH] Using signer authentication")

        self._config = config
        self._signature_generator = SignatureGenerator(config.private_key) if config.private_key else None
        self._resources = ResourceManager(config, transport)

    @property
    def config(self) -> MimicConfig:
        return self._config

    @property
    def signer(self) -> Optional[SignatureGenerator]:
        """Signature generator, when a private key is configured."""
        return self._signature_generator

    def require_signer(self) -> SignatureGenerator:
        if self._signature_generator is None:
            raise MimicAuthError("PRIVATE_KEY is required to sign task configurations")
        return self._signature_generator

    @property
    def users(self) -> UsersResource:
        return self._resources.users

    @property
    def tasks(self) -> TasksResource:
        return self._resources.tasks

    @property
    def configs(self) -> ConfigsResource:
        return self._resources.configs

    @property
    def executions(self) -> ExecutionsResource:
        return self._resources.executions
