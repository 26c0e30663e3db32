"""
counter/__init__.py - Word Counter Orchestrator

Runs the single pipeline of the program:
- Tokenize and count the words of the input file
- Ask the user where the word counts should be stored
- Write the sorted word counts and report the result

Key role: High-level coordinator that ties together tokenizer, prompt
and writer. Failures are raised as WordCounterError for launch.py.
"""

from utils import get_logger
from counter import messages
from counter.errors import ConfigError, InvalidExtensionError, UsageError
from counter.prompt import default_output_filename, prompt_output_filename
from counter.tokenizer import (
    TXT_EXTENSION,
    compute_word_frequencies,
    has_txt_extension,
    tokenize_generator,
)
from counter.writer import write_word_counts


def validate_input_filename(filename):
    """
    Check the command-line filename before any file is touched.

    Raises:
        UsageError: if no filename was given
        InvalidExtensionError: if it does not end with ".txt"
    """
    if filename is None:
        raise UsageError()
    if not has_txt_extension(filename):
        raise InvalidExtensionError(filename, TXT_EXTENSION)
    return filename


class WordCounter(object):
    """
    Counts the words of one text file and writes them to another.
    """

    def __init__(self, config, read_line=input, prompt=prompt_output_filename,
                 writer=write_word_counts):
        """
        Initialize the word counter.

        Args:
            config: Configuration object (encoding, cursor, logging)
            read_line: Source of interactive input lines (for testing)
            prompt: Output filename prompt (for testing)
            writer: Word counts writer (for testing)
        """
        self.config = config
        try:
            self.logger = get_logger(
                "COUNTER", config.log_file, config.log_level)
        except OSError as exc:
            raise ConfigError(
                f"The log file \"{config.log_file}\" could not be opened.\n{exc}") from exc
        self.read_line = read_line
        self.prompt = prompt
        self.writer = writer

    def count(self, input_filename):
        """Tokenize the input file and return its word frequencies."""
        tokens = tokenize_generator(
            input_filename, self.config.encoding, self.config.decode_errors)
        frequencies = compute_word_frequencies(tokens)
        self.logger.info(
            f"Counted {sum(frequencies.values())} words, {len(frequencies)} distinct, "
            f"in {input_filename}.")
        return frequencies

    def choose_output_filename(self, input_filename):
        messages.print_ln_text_ln(messages.STORING_NOTICE)
        output_filename = self.prompt(
            default_output_filename(input_filename),
            self.config.cursor,
            self.read_line)
        self.logger.info(f"Word counts will be written to {output_filename}.")
        return output_filename

    def start(self, input_filename):
        """
        Run the whole pipeline for input_filename.

        Returns:
            The output filename that was written
        """
        validate_input_filename(input_filename)
        frequencies = self.count(input_filename)
        output_filename = self.choose_output_filename(input_filename)

        written = self.writer(
            frequencies, output_filename, self.config.encoding)
        self.logger.info(f"Wrote {written} lines to {output_filename}.")

        messages.print_ln_text_ln(
            messages.summary(input_filename, output_filename))
        messages.print_ln_text_ln(messages.farewell())
        return output_filename
