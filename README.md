# lazytower

A LazyTower accumulator whose levels are folded with the Poseidon hash over
the BN254 scalar field (width 5, 8 full and 60 partial rounds, S-box x^5).
The package is pure Python and has no runtime dependencies.

Field elements are plain Python `int`s, reduced modulo the BN254 scalar field
order (`lazytower.constants.MODULUS`, also exported by `lazytower.params`).

## Poseidon permutation and sponge

```python
from lazytower.poseidon import Poseidon
from lazytower.sponge import PoseidonSponge

state = Poseidon([0, 1, 2, 3, 4]).permute()   # tuple of five field elements

sponge = PoseidonSponge()
sponge.update([1, 2])
digest = sponge.squeeze()
```

`Poseidon` takes exactly five values (any other count raises `ValueError`)
and reduces each modulo the field order. `permute` runs four full rounds,
sixty partial rounds and four more full rounds.

`PoseidonSponge.squeeze` absorbs the queued inputs in chunks of five,
zero-padding the last chunk and adding each chunk to the current state before
permuting, then returns the first state element. With nothing queued a single
zero is absorbed. The queue is cleared after a squeeze; the state carries over
to the next one.

## LazyTower

```python
from lazytower.tower import LazyTower, TowerFullError, poseidon_pair

tower = LazyTower(2, 4)          # height 2, width 4
for value in range(10):
    tower.add(value)

tower.levels                     # current items of each level
tower.full_levels                # every item ever added to each level
tower.digest([0, 1, 2, 3])       # left fold of poseidon_pair over the items
```

`poseidon_pair(a, b)` hashes two elements with a fresh `PoseidonSponge`.
When a level already holds `width` items, adding one more pushes the digest of
that level to the level above and restarts the level with the new item.
Needing a level at or above `height` raises `TowerFullError`. `digest` of an
empty sequence raises `ValueError`.

## Parameters

`lazytower.params` holds the building blocks: `hex_to_field`, `sbox`,
`sbox_inv`, `round_constants_count`, `round_constants`,
`load_round_constants`, `mds`, `apply_round_constants` and `apply_mds`.

`lazytower.constants` gives the tables as hex strings through
`round_constants_raw()` and `mds_raw()`. The round constants are derived with
the Grain LFSR from the instance parameters on first use and then cached, so
the first call takes a moment.

## What it does not do

This is a library only: there is no command-line tool, no way to save or load
a tower, and no membership proofs for items in a tower.

## Tests

```
pip install -e .[test]
pytest
```