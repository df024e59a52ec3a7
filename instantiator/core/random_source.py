from typing import Optional, Sequence, TypeVar

import numpy as np
from faker import Faker

T = TypeVar("T")


class RandomSource:
    """Seedable source behind the default primitive generators.

    Numbers and booleans come from a numpy ``Generator``, text from Faker.
    Two sources built with the same seed yield the same sequence of values
    as long as they are consumed in the same order.
    """

    def __init__(self, seed: Optional[int] = None):
        self.seed = seed
        self.rng = np.random.default_rng(seed)
        self.fake = Faker()
        if seed is not None:
            self.fake.seed_instance(seed)

    def _bounded(self, dtype) -> int:
        info = np.iinfo(dtype)
        return int(self.rng.integers(info.min, info.max, dtype=dtype, endpoint=True))

    def int32(self) -> int:
        return self._bounded(np.int32)

    def int64(self) -> int:
        return self._bounded(np.int64)

    def int16(self) -> int:
        return self._bounded(np.int16)

    def int8(self) -> int:
        return self._bounded(np.int8)

    def float64(self) -> float:
        return float(self.rng.random())

    def float32(self) -> float:
        return float(self.rng.random(dtype=np.float32))

    def boolean(self) -> bool:
        return bool(self.rng.integers(2))

    def text(self) -> str:
        return self.fake.pystr(min_chars=1, max_chars=20)

    def char(self) -> str:
        return self.fake.random_letter()

    def choice(self, options: Sequence[T]) -> T:
        """Pick one element uniformly at random."""
        if not options:
            raise ValueError("Cannot choose from an empty sequence")
        return options[int(self.rng.integers(len(options)))]
