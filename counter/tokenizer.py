"""
tokenizer.py - Word tokenizing and frequency counting

Splits a text file into whitespace-delimited words and tallies how often
each exact word occurs. Words are kept verbatim: no case folding and no
punctuation stripping.
"""

import re

from counter.errors import FileOpenError


TXT_EXTENSION = ".txt"

# Whitespace runs, except the no-break spaces and NEL, which stay inside words
SEPARATOR = re.compile(r"[^\S\xa0\u2007\u202f\x85]+")


def has_txt_extension(filename):
    """Case-sensitive suffix check; the path is not normalized."""
    return filename.endswith(TXT_EXTENSION)


def split_words(line):
    """
    Split on runs of breaking whitespace (space, tab, newline, form feed,
    Unicode spaces). U+00A0, U+2007, U+202F and U+0085 do not separate
    words, so a number and its unit joined by a no-break space is one word.
    """
    return [word for word in SEPARATOR.split(line) if word]


def tokenize_generator(file_path, encoding="utf-8", errors="ignore"):
    """
    Runtime Complexity: O(n)
    where n is the total number of characters in the input file.
    Each line is split once; a newline is whitespace, so no word
    spans two lines.

    Raises:
        FileOpenError: if the file cannot be opened or read
    """
    try:
        with open(file_path, "r", encoding=encoding, errors=errors) as file:
            for line in file:
                yield from split_words(line)
    except (OSError, UnicodeDecodeError) as exc:
        raise FileOpenError(str(exc)) from exc


def compute_word_frequencies(tokens):
    """
    Runtime Complexity: O(T) where T is the total number of tokens.
    Each token is processed once, and dictionary operations are O(1).
    """
    frequencies = {}
    for token in tokens:
        frequencies[token] = frequencies.get(token, 0) + 1
    return frequencies
