"""Constants and defaults.

Note: Keep constants here to avoid magic values spread across code.
"""

DEFAULT_CLASS_ID = "CLASS001"
DEFAULT_PORT = 10000
