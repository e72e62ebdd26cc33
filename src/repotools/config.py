import json
import os

from .logging_config import get_logger

logger = get_logger(__name__)
config: dict = None

# Env var -> key in the "tools" section
_TOOL_ENV_OVERRIDES = {
    "REPOTOOLS_MAX_GREP_MATCHES": "max_grep_matches",
    "REPOTOOLS_MAX_READ_LINES": "max_read_lines",
    "REPOTOOLS_MAX_READ_CHARS": "max_read_chars",
}


def _initialise_config(path: str = "config.json") -> dict:
    """Get tool configuration.

    Loads configuration from a JSON file and also optionally from env vars
    """

    config = {
        "log_level": "INFO",
        "log_file": None,
        "tools": {
            "max_grep_matches": 20,
            "max_read_lines": 200,
            "max_read_chars": 15000,
            "default_context_lines": 2,
            "default_search_results": 10,
        },
    }

    # Attempt to load config.json; allow missing files
    try:
        with open(path, "r") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError("top level must be an object")
        tools = loaded.pop("tools", None)
        config.update(loaded)
        if isinstance(tools, dict):
            config["tools"].update(tools)
    except FileNotFoundError:
        logger.debug("No %s found (using defaults)", path)
    except (OSError, ValueError) as e:
        logger.warning("Could not load %s: %s (using defaults)", path, e)

    if os.getenv("REPOTOOLS_LOG_LEVEL"):
        config["log_level"] = os.getenv("REPOTOOLS_LOG_LEVEL").upper()
    if os.getenv("REPOTOOLS_LOG_FILE") is not None:
        config["log_file"] = os.getenv("REPOTOOLS_LOG_FILE")

    for env_name, key in _TOOL_ENV_OVERRIDES.items():
        raw = os.getenv(env_name)
        if raw is None:
            continue
        try:
            config["tools"][key] = int(raw)
        except ValueError:
            logger.warning("Ignoring %s=%r (not an integer)", env_name, raw)

    return config

config = _initialise_config()
