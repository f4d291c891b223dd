"""Exception type shared by the cursor-sync commands."""


class CursorSyncError(Exception):
    """A failure that is reported to the user as ``error: <message>``."""