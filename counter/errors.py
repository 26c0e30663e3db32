"""
errors.py - Terminal error kinds for the word counter

Every failure the program reports to the user is a WordCounterError.
They are raised where the failure happens and handled once, in launch.py.
"""


class WordCounterError(Exception):
    """Base class for failures that end the program with a message."""

    exit_code = 1


class UsageError(WordCounterError):
    def __init__(self):
        super().__init__(
            "No filename was specified.\n"
            "Please rerun this program with your filename as the first argument.")


class InvalidExtensionError(WordCounterError):
    def __init__(self, filename, extension=".txt"):
        self.filename = filename
        super().__init__(
            f"The filename must end with the file extension \"{extension}\".")


class FileOpenError(WordCounterError):
    """The input file is missing or cannot be read."""


class FileWriteError(WordCounterError):
    """The word counts file cannot be created or written."""


class PromptClosedError(WordCounterError):
    def __init__(self):
        super().__init__(
            "No more input was available. The word counts were not written.")


class ConfigError(WordCounterError):
    """The configuration file or the log file it names cannot be used."""
