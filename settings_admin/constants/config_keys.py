"""Environment configuration keys."""


class ConfigKeys:
    """Names of the environment variables read by config.env."""

    # Settings API
    API_URL = "SETTINGS_API_URL"
    API_TOKEN = "SETTINGS_API_TOKEN"
    API_TIMEOUT = "SETTINGS_API_TIMEOUT"

    # Logging
    LOG_LEVEL = "LOG_LEVEL"


class ConfigDefaults:
    """Default values used when a key is not set."""

    API_URL = "http://localhost:5000/api"
    API_TIMEOUT = "30"

    LOG_LEVEL = "info"
