"""
writer.py - Word counts file output

Serializes a word frequency mapping as "word: count" lines in ascending
word order. The mapping is drained while writing, so each entry is
emitted exactly once.
"""

from counter.errors import FileWriteError


def format_entry(word, count):
    return f"{word}: {count}\n"


def drain_sorted(frequencies):
    """
    Runtime Complexity: O(n log n) where n is the number of distinct words.
    Yields (word, count) in ascending ordinal order, removing each entry
    from the mapping as it is yielded.
    """
    for word in sorted(frequencies):
        yield word, frequencies.pop(word)


def write_word_counts(frequencies, output_path, encoding="utf-8"):
    """
    Write and drain the word counts, creating or truncating output_path.

    Returns:
        Number of lines written

    Raises:
        FileWriteError: if the file cannot be opened or a write fails.
            Lines already written are left in place.
    """
    written = 0
    try:
        with open(output_path, "w", encoding=encoding) as out:
            for word, count in drain_sorted(frequencies):
                out.write(format_entry(word, count))
                written += 1
    except (OSError, UnicodeEncodeError) as exc:
        raise FileWriteError(str(exc)) from exc
    return written
