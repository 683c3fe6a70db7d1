from pathlib import Path
import pytest


FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def wordlist_path(tmp_path):
    path = tmp_path / "wordlist.txt"
    path.write_bytes(b"test\nline2\n{SWAP}stest\n")
    return path


@pytest.fixture
def expected_all():
    return (FIXTURES / "expected_all.txt").read_text(encoding="utf-8").splitlines()


class BrokenReader:
    closed = False

    def readline(self):
        raise OSError("device not ready")

    def close(self):
        self.closed = True


@pytest.fixture
def broken_reader():
    return BrokenReader()
