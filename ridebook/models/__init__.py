from .driver import Driver
from .user import User

__all__ = ["Driver", "User"]
