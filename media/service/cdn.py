"""
CDN path rewriting.
"""


class ServerCDN:
    """Serve files from a base path on the same server (or a CDN host prefix)"""

    def __init__(self, path):
        self.path = path

    def get_path(self, relative_path, is_flushable=False):
        return f"{self.path.rstrip('/')}/{relative_path.lstrip('/')}"

    def flush(self, path):
        """Nothing is cached by this CDN, so there is nothing to flush."""
        return None
