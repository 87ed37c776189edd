"""The Poseidon permutation (Hades design) over BN254 with width 5."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .params import (
    FULL_ROUNDS,
    MODULUS,
    PARTIAL_ROUNDS,
    WIDTH,
    apply_mds,
    apply_round_constants,
    load_round_constants,
    round_constants,
    round_constants_count,
    sbox,
)

__all__ = ["Poseidon"]


@dataclass(frozen=True)
class Poseidon:
    """A Poseidon state ready to be permuted."""

    inputs: tuple[int, ...]

    def __init__(self, inputs: Iterable[int]) -> None:
        values = tuple(int(value) % MODULUS for value in inputs)
        if len(values) != WIDTH:
            raise ValueError(f"Poseidon takes {WIDTH} inputs, got {len(values)}")
        object.__setattr__(self, "inputs", values)

    def permute(self) -> tuple[int, ...]:
        """Run the full permutation: half the full rounds, the partial rounds,
        then the other half of the full rounds."""
        half_full = FULL_ROUNDS // 2
        constants = round_constants()
        first_end = half_full * WIDTH
        second_end = first_end + PARTIAL_ROUNDS * WIDTH
        first = constants[:first_end]
        second = constants[first_end:second_end]
        third = constants[second_end : round_constants_count()]

        state = self.inputs
        state = self._full_rounds(state, first, half_full)

        for round_index in range(PARTIAL_ROUNDS):
            state = apply_round_constants(
                state, load_round_constants(round_index, second)
            )
            state = (sbox(state[0]), *state[1:])
            state = apply_mds(state)

        return self._full_rounds(state, third, half_full)

    @staticmethod
    def _full_rounds(
        state: tuple[int, ...], constants: tuple[int, ...], rounds: int
    ) -> tuple[int, ...]:
        for round_index in range(rounds):
            state = apply_round_constants(
                state, load_round_constants(round_index, constants)
            )
            state = tuple(sbox(value) for value in state)
            state = apply_mds(state)
        return state