"""Check commit messages against an opinionated style guide."""

__version__ = "1.0.0"

from .errors import ConfigurationError, InspectionError
from .inspection import check
from .inspector import CommitMessageInspector
from .verbs import VerbWhitelist, build_whitelist

__all__ = [
    "check",
    "build_whitelist",
    "VerbWhitelist",
    "CommitMessageInspector",
    "ConfigurationError",
    "InspectionError",
    "__version__",
]
