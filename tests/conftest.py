import pytest


class CountingGraphemes:
    """Grapheme source that records how many clusters were pulled."""

    def __init__(self) -> None:
        self.pulled = 0

    def clusters(self, text):
        for char in text:
            self.pulled += 1
            yield char


@pytest.fixture
def counting_graphemes():
    return CountingGraphemes()
