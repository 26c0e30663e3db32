"""
messages.py - User-facing text

Every message is printed with a blank line before and after it. Back to back
messages share one blank line between them.
"""

PROGRAM_NAME = "Word Counter"

INVALID_INPUT = "Your input was invalid. Please try again."
STORING_NOTICE = "The word counts will be stored in a file."

# True while the last line written to the terminal is blank
_after_blank_line = False


def print_ln_text_ln(text):
    """Print text surrounded by blank lines."""
    global _after_blank_line
    if not _after_blank_line:
        print()
    print(text)
    print()
    _after_blank_line = True


def print_text_input_cursor(cursor):
    """Show where the user should type; the cursor stays on its line."""
    global _after_blank_line
    if not _after_blank_line:
        print()
    print(f"{cursor} ", end="", flush=True)
    _after_blank_line = False


def output_filename_request(default_filename):
    return (
        "Please enter a filename with a \".txt\" file extension for the words "
        f"counts file or press ENTER to use the filename \"{default_filename}\".")


def summary(input_filename, output_filename):
    return (
        f"The words from \"{input_filename}\" were counted and written to "
        f"\"{output_filename}\" with their associated word counts.")


def farewell():
    return f"Thank you for using the {PROGRAM_NAME} program!\nGoodbye."
