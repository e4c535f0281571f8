from rating_refresh.mimic.resources.base import BaseResource
from rating_refresh.mimic.resources.configs import ConfigParameters, ConfigsResource
from rating_refresh.mimic.resources.executions import ExecutionsResource
from rating_refresh.mimic.resources.tasks import TasksResource
from rating_refresh.mimic.resources.users import UsersResource

__all__ = [
    "BaseResource",
    "ConfigParameters",
    "ConfigsResource",
    "ExecutionsResource",
    "TasksResource",
    "UsersResource",
]
