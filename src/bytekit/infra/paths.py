from importlib.resources import files

from platformdirs import user_config_path

PACKAGE_NAME = "bytekit"

# -----------------------------------------------------------------------------
# User-writable directories & files
# -----------------------------------------------------------------------------

USER_CONFIG_DIR = user_config_path(PACKAGE_NAME, appauthor=False)

SETTING_PATH = USER_CONFIG_DIR / "settings.json"

# Filenames probed in the working directory, in priority order
LOCAL_SETTING_FILES = ["settings.toml", "settings.json"]

# -----------------------------------------------------------------------------
# Embedded resources
# -----------------------------------------------------------------------------

RES = files("bytekit.resources")

DEFAULT_CONFIG_FILE = RES.joinpath("config", "settings.sample.toml")
DEFAULT_CONFIG_FILENAME = "settings.toml"
