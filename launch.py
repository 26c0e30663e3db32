"""
launch.py - Word Counter Entry Point

Main entry point for the word counter application.
Validates the input filename, loads configuration, runs the counter
and turns any failure into a message and an exit status.

Usage:
    python launch.py story.txt                          # Count words in story.txt
    python launch.py story.txt --config_file path.ini   # Use custom config file
"""

import sys
from configparser import ConfigParser, Error as ConfigParserError
from argparse import ArgumentParser

from utils.config import Config
from counter import WordCounter, validate_input_filename
from counter.errors import ConfigError, WordCounterError
from counter.messages import print_ln_text_ln


def load_config(config_file):
    """
    Read the INI file into a Config. A missing file means all defaults.

    Raises:
        ConfigError: if the file cannot be parsed or holds bad values
    """
    cparser = ConfigParser()
    try:
        cparser.read(config_file, encoding="utf-8")
        return Config(cparser)
    except (ConfigParserError, ValueError) as exc:
        raise ConfigError(
            f"The configuration file \"{config_file}\" could not be used.\n{exc}") from exc


def main(config_file, filename, read_line=input):
    """
    Count the words of a file and return the process exit status.

    Args:
        config_file: Path to configuration file (default: config.ini)
        filename: Input filename from the command line, or None
        read_line: Source of interactive input lines
    """
    counter = None
    try:
        # Nothing is read from disk until the filename is known to be usable
        validate_input_filename(filename)

        config = load_config(config_file)
        counter = WordCounter(config, read_line=read_line)
        counter.start(filename)
    except WordCounterError as exc:
        print_ln_text_ln(str(exc))
        if counter is not None:
            counter.logger.debug(f"{type(exc).__name__}: {exc}", exc_info=True)
        return exc.exit_code
    return 0


def parse_args(argv):
    """
    The first argument is always the input filename, taken verbatim even
    when it starts with "-". Only the arguments after it are parsed.
    """
    parser = ArgumentParser(add_help=False)
    parser.add_argument("--config_file", type=str, nargs="?",
                        default="config.ini", const="config.ini",
                        help="Path to configuration file")
    # Unrecognized arguments after the filename are ignored
    args, _ = parser.parse_known_args(argv[1:])
    args.filename = argv[0] if argv else None
    return args


def run():
    args = parse_args(sys.argv[1:])
    sys.exit(main(args.config_file, args.filename))


if __name__ == "__main__":
    run()
