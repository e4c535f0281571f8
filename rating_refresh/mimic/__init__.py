"""
Mimic client - access to the Mimic task platform (login, tasks, configurations, executions).
"""

from rating_refresh.mimic.auth.signatures import SignatureGenerator
from rating_refresh.mimic.client import MimicClient
from rating_refresh.mimic.resources.configs import ConfigParameters

__all__ = ["MimicClient", "SignatureGenerator", "ConfigParameters"]
