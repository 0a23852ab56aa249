from .beatmaps import *  # noqa: F403
from .scores import *  # noqa: F403
from .users import *  # noqa: F403
