import io

from stone_paper_scissors.console import Console


class ScriptedRandom:
    """Stands in for random.Random, returning preset choices in order."""

    def __init__(self, picks):
        self.picks = iter(picks)

    def choice(self, seq):
        pick = next(self.picks)
        assert pick in seq
        return pick


def make_console(text):
    return Console.unpaced(io.StringIO(text), io.StringIO())
