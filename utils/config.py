import logging


class Config(object):
    """Typed view over the word counter's INI configuration."""

    def __init__(self, config):
        self.encoding = config.get(
            "LOCAL PROPERTIES", "ENCODING", fallback="utf-8").strip()
        self.decode_errors = config.get(
            "LOCAL PROPERTIES", "DECODEERRORS", fallback="ignore").strip()
        self.cursor = config.get("DISPLAY", "CURSOR", fallback=">").strip()
        self.log_level = config.get(
            "LOGGING", "LEVEL", fallback="WARNING").strip().upper()
        self.log_file = config.get("LOGGING", "LOGFILE", fallback="").strip()

        if not isinstance(logging.getLevelName(self.log_level), int):
            raise ValueError(
                f"[LOGGING] LEVEL must be a logging level name, got \"{self.log_level}\".")
