from collections import deque
import logging
from pathlib import Path
from wlinflate.core.transforms import SWAP_TOKEN, TransformSet
from wlinflate.utils.file_io import WordlistReadError, decode_word, get_number_of_words


def expand_word(word, transforms):
    """
    Expand one base word into every permutation, in output order.

    Each stage only walks the entries that existed before it started, so
    nothing produced by a stage is fed back into that same stage.
    """
    word_perms = deque()

    # Swap and base word: a placeholder with no swap values drops the line
    if SWAP_TOKEN in word:
        for s in transforms.swap:
            word_perms.append(word.replace(SWAP_TOKEN, s))
    else:
        word_perms.append(word)

    # Prepends
    for i in range(len(word_perms)):
        for p in transforms.prepend:
            word_perms.append(f"{p}{word_perms[i]}")

    # Appends
    for i in range(len(word_perms)):
        for a in transforms.append:
            word_perms.append(f"{word_perms[i]}{a}")

    # Extensions
    for i in range(len(word_perms)):
        for e in transforms.extensions:
            word_perms.append(f"{word_perms[i]}{e}")

    return word_perms


class Wordlist:
    """
    Single-pass iterator over the expanded wordlist.

    The file is opened on construction and read one line at a time; only
    the permutations of the current line are held in memory.
    """

    def __init__(self, path, prepend=None, append=None, swap=None, extensions=None):
        self.path = Path(path)
        self.transforms = TransformSet.from_strings(prepend, append, swap, extensions)
        self.base_count = get_number_of_words(self.path)
        self.total_count = self.base_count * self.transforms.multiplier
        self.reader = self.path.open("rb")
        self.word_perms = deque()

    @property
    def prepend(self):
        return self.transforms.prepend

    @property
    def append(self):
        return self.transforms.append

    @property
    def swap(self):
        return self.transforms.swap

    @property
    def extensions(self):
        return self.transforms.extensions

    @property
    def closed(self):
        return self.reader.closed

    def __iter__(self):
        return self

    def __next__(self):
        while not self.word_perms:
            if self.reader.closed:
                raise StopIteration
            try:
                line = self.reader.readline()
            except OSError as e:
                self.close()
                raise WordlistReadError(f"Failed to read from {self.path}: {e}") from e

            if not line:
                self.close()
                raise StopIteration

            base_word = decode_word(line)
            self.word_perms = expand_word(base_word, self.transforms)
            if not self.word_perms:
                logging.debug(f"No swap values for '{base_word}', line skipped.")

        return self.word_perms.popleft()

    def close(self):
        self.reader.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
