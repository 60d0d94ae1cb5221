"""
Version command handler.
"""

from ..version import VERSION, DATE
from .base_handler import BaseHandler


class VersionHandler(BaseHandler):

    def run(self, args):
        self.ui.output(f"{self._program_name()} v{VERSION} ({DATE})")
        return 0

    def synopsis(self):
        return "Show version information"

    def help(self):
        return f"usage: {self._program_name()} version\n\n  Prints the version and release date."
