"""tshack: scaffold, open and live-run throwaway TypeScript playgrounds.

The CLI lives in ``tshack.cli.main``. Importing the package keeps its loguru
output switched off; call ``tshack.enable_logging()`` to see it on stderr.
"""

from tshack.common import disable_library_logging, enable_library_logging
from tshack.constants import VERSION

__version__ = VERSION

disable_library_logging()

enable_logging = enable_library_logging

__all__ = [
    "__version__",
    "enable_logging",
]
