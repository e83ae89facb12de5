"""LeakScan - line-oriented secret and sensitive data scanner."""

from .version import VERSION

__version__ = VERSION
