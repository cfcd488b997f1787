import random


class FixedRandom(random.Random):
    """randint() returns the queued values in order (and checks they are in range)."""

    def __init__(self, values):
        super().__init__(0)
        self._values = list(values)

    def randint(self, a, b):
        v = self._values.pop(0)
        assert a <= v <= b, f"{v} outside [{a}, {b}]"
        return v
