"""A sponge construction over the Poseidon permutation."""

from __future__ import annotations

from typing import Iterable

from .params import MODULUS, WIDTH
from .poseidon import Poseidon

__all__ = ["PoseidonSponge"]


class PoseidonSponge:
    """Collects field elements and squeezes one field element out."""

    def __init__(self) -> None:
        self.inputs: list[int] = []
        self.state: tuple[int, ...] = (0,) * WIDTH

    def update(self, inputs: Iterable[int]) -> None:
        """Queue field elements for absorption."""
        self.inputs.extend(int(value) % MODULUS for value in inputs)

    def squeeze(self) -> int:
        """Absorb the queued inputs in chunks of WIDTH and return state[0].

        With nothing queued a single zero is absorbed. The queue is cleared;
        the state carries over to the next squeeze.
        """
        if not self.inputs:
            self.inputs.append(0)

        for start in range(0, len(self.inputs), WIDTH):
            chunk = self.inputs[start : start + WIDTH]
            padded = chunk + [0] * (WIDTH - len(chunk))
            absorbed = [(a + b) % MODULUS for a, b in zip(padded, self.state)]
            self.state = Poseidon(absorbed).permute()

        self.inputs.clear()
        return self.state[0]