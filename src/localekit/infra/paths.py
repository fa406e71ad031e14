from importlib.resources import files

from platformdirs import user_config_path

PACKAGE_NAME = "localekit"  # Python package name

# -----------------------------------------------------------------------------
# User-writable directories & files
# -----------------------------------------------------------------------------

# Base config directory (e.g. ~/.config/localekit/)
USER_CONFIG_DIR = user_config_path(PACKAGE_NAME, appauthor=False)

SETTING_PATH = USER_CONFIG_DIR / "settings.json"

# -----------------------------------------------------------------------------
# Embedded resources
# -----------------------------------------------------------------------------

RES = files("localekit.resources")

# Config
DEFAULT_CONFIG_FILE = RES.joinpath("config", "settings.sample.toml")

# Default config filename (used when copying embedded template)
DEFAULT_CONFIG_FILENAME = "localekit.toml"

# Output templates
TEMPLATES_DIR = RES.joinpath("templates")
TEMPLATE_MESSAGES = TEMPLATES_DIR.joinpath("messages.js")
TEMPLATE_MESSAGES_JSON = TEMPLATES_DIR.joinpath("messages.json")
TEMPLATE_WINDOW_OBJECT = TEMPLATES_DIR.joinpath("messages_as_window_object.js")
TEMPLATE_LANGJS_WITH_MESSAGES = TEMPLATES_DIR.joinpath("langjs_with_messages.js")

# Runtime library embedded by the default template
LANGJS_FILE = RES.joinpath("lib", "lang.js")
