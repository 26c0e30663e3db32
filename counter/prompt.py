"""
prompt.py - Output filename prompt

Asks the user to accept the default word counts filename or type another
one ending in ".txt". Invalid answers are a normal loop iteration: the user
is told and asked again, with no limit on retries.
"""

from counter.errors import PromptClosedError
from counter.messages import (
    INVALID_INPUT,
    output_filename_request,
    print_ln_text_ln,
    print_text_input_cursor,
)
from counter.tokenizer import TXT_EXTENSION, has_txt_extension


OUTPUT_SUFFIX = " - WordCounts.txt"


def default_output_filename(input_filename):
    """Replace the rightmost ".txt" with " - WordCounts.txt"."""
    head, sep, tail = input_filename.rpartition(TXT_EXTENSION)
    if not sep:
        return input_filename + OUTPUT_SUFFIX
    return head + OUTPUT_SUFFIX + tail


def prompt_output_filename(default_filename, cursor=">", read_line=input):
    """
    Ask for the output filename until a valid answer is given.

    Args:
        default_filename: Filename used when the user just presses ENTER
        cursor: Text shown where the user types
        read_line: Callable returning one line of user input (no newline)

    Returns:
        The chosen output filename

    Raises:
        PromptClosedError: if the input stream ends before a valid answer
    """
    while True:
        print_ln_text_ln(output_filename_request(default_filename))
        print_text_input_cursor(cursor)
        try:
            user_input = read_line()
        except EOFError:
            raise PromptClosedError() from None

        if not user_input.strip():
            return default_filename
        if has_txt_extension(user_input):
            return user_input
        print_ln_text_ln(INVALID_INPUT)
