from contextlib import contextmanager
import sys


ENCODING, ERRORS = "utf-8", "surrogateescape"


class WordlistReadError(Exception):
    """Raised when the wordlist cannot be read after it was opened."""
    pass


def strip_newline(line):
    """Drop one trailing LF, then one CR if the line ended in CRLF."""
    if line.endswith(b"\n"):
        line = line[:-1]
        if line.endswith(b"\r"):
            line = line[:-1]
    return line


def decode_word(line):
    return strip_newline(line).decode(ENCODING, ERRORS)


def get_number_of_words(path_to_words):
    # A final line without a newline is not counted
    with path_to_words.open("rb") as file:
        return sum(1 for line in file if line.endswith(b"\n"))


@contextmanager
def open_output(output_path=None):
    """
    Yield a buffered binary writer for the generated words.
    Writes to stdout when no path is given. Flushed once on the way out.
    """
    if output_path is None:
        writer = sys.stdout.buffer
        try:
            yield writer
        finally:
            writer.flush()
    else:
        with output_path.open("wb") as writer:
            yield writer


def write_word(writer, word):
    writer.write(word.encode(ENCODING, ERRORS))
    writer.write(b"\n")
