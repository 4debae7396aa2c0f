"""Port interfaces (Protocols).

No HTTP client imports allowed here.
"""

from .transport import HttpTransport

__all__ = ["HttpTransport"]
