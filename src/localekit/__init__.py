from .version import __version__ as __version__

__title__ = "localekit"
__description__ = "Export server-side locale message files to a JavaScript bundle."
__author__ = "localekit contributors"
__license__ = "MIT"
