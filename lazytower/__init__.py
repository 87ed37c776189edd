"""LazyTower accumulator with a Poseidon BN254 width-5 sponge hash."""

__version__ = "0.1.0"