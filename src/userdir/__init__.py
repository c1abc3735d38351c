"""userdir - in-memory user directory."""

from .exceptions import DuplicateUserIdError, SeedFileError, UserDirError
from .models import User
from .service import UserDirectory, default_seed

__version__ = "0.1.0"

__all__ = [
    "User",
    "UserDirectory",
    "default_seed",
    "UserDirError",
    "DuplicateUserIdError",
    "SeedFileError",
    "__version__",
]
