from .chat import ChatEntry  # noqa: F401
from .enums import MoodType, Theme  # noqa: F401
from .mood import MoodRecord  # noqa: F401
from .user import User, UserSettings  # noqa: F401
