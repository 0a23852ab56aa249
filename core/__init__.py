from .osu import *  # noqa: F403
