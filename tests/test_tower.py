import pytest

from lazytower.poseidon import Poseidon
from lazytower.sponge import PoseidonSponge
from lazytower.tower import LazyTower, TowerFullError, poseidon_pair


def test_digest_of_four_items():
    tower = LazyTower(2, 4)
    check = tower.digest([0, 1, 2, 3])
    step = poseidon_pair(poseidon_pair(poseidon_pair(0, 1), 2), 3)
    assert check == step


def test_poseidon_pair_is_sponge_of_two():
    sponge = PoseidonSponge()
    sponge.update([4, 9])
    assert poseidon_pair(4, 9) == sponge.squeeze()
    assert poseidon_pair(4, 9) == Poseidon([4, 9, 0, 0, 0]).permute()[0]


def test_poseidon_pair_is_order_sensitive():
    assert poseidon_pair(1, 2) != poseidon_pair(2, 1)


def test_digest_of_single_item_is_item():
    assert LazyTower(1, 1).digest([42]) == 42


def test_digest_of_empty_raises():
    with pytest.raises(ValueError):
        LazyTower(1, 1).digest([])


def test_add_fills_first_level():
    tower = LazyTower(2, 2)
    tower.add(1)
    tower.add(2)
    assert tower.levels == [[1, 2]]
    assert tower.full_levels == [[1, 2]]


def test_add_overflow_pushes_digest_up():
    tower = LazyTower(2, 2)
    for item in (1, 2, 3):
        tower.add(item)
    digest = poseidon_pair(1, 2)
    assert tower.levels == [[3], [digest]]
    assert tower.full_levels == [[1, 2, 3], [digest]]


def test_tower_full_raises():
    tower = LazyTower(1, 2)
    tower.add(1)
    tower.add(2)
    with pytest.raises(TowerFullError) as info:
        tower.add(3)
    assert str(info.value) == "The tower is full."


def test_zero_height_is_full_immediately():
    with pytest.raises(TowerFullError):
        LazyTower(0, 4).add(1)


def test_second_level_collects_digests():
    tower = LazyTower(3, 2)
    for item in range(5):
        tower.add(item)
    assert tower.levels == [[4], [poseidon_pair(0, 1), poseidon_pair(2, 3)]]
    assert tower.full_levels[0] == [0, 1, 2, 3, 4]