"""Poseidon parameters for the BN254 scalar field, width 5, S-box x^5."""

from __future__ import annotations

from functools import lru_cache
from typing import Iterator

MODULUS = 0x30644E72E131A029B85045B68181585D2833E84879B9709143E1F593F0000001
FIELD_BITS = 254
WIDTH = 5
FULL_ROUNDS = 8
PARTIAL_ROUNDS = 60

_GRAIN_TAPS = (62, 51, 38, 23, 13, 0)
_GRAIN_MASK = sum(1 << tap for tap in _GRAIN_TAPS)
_GRAIN_SIZE = 80
_GRAIN_WARMUP = 160

_MDS: tuple[tuple[int, ...], ...] = (
    (
        0x251E7FDF99591080080B0AF133B9E4369F22E57ACE3CD7F64FC6FDBCF38D7DA1,
        0x25FB50B65ACF4FB047CBD3B1C17D97C7FE26EA9CA238D6E348550486E91C7765,
        0x293D617D7DA72102355F39EBF62F91B06DEB5325F367A4556EA1E31ED5767833,
        0x104D0295AB00C85E960111AC25DA474366599E575A9B7EDF6145F14BA6D3C1C4,
        0x0AAA35E2C84BAF117DEA3E336CD96A39792B3813954FE9BF3ED5B90F2F69C977,
    ),
    (
        0x2A70B9F1D4BBCCDBC03E17C1D1DCDB02052903DC6609EA6969F661B2EB74C839,
        0x281154651C921E746315A9934F1B8A1BBA9F92AD8EF4B979115B8E2E991CCD7A,
        0x28C2BE2F8264F95F0B53C732134EFA338CCD8FDB9EE2B45FB86A894F7DB36C37,
        0x21888041E6FEBD546D427C890B1883BB9B626D8CB4DC18DCC4EC8FA75E530A13,
        0x14DDB5FADA0171DB80195B9592D8CF2BE810930E3EA4574A350D65E2CBFF4941,
    ),
    (
        0x2F69A7198E1FBCC7DEA43265306A37ED55B91BFF652AD69AA4FA8478970D401D,
        0x001C1EDD62645B73AD931AB80E37BBB267BA312B34140E716D6A3747594D3052,
        0x15B98CE93E47BC64CE2F2C96C69663C439C40C603049466FA7F9A4B228BFC32B,
        0x12C7E2ADFA524E5958F65BE2FBAC809FCBA8458B28E44D9265051DE33163CF9C,
        0x2EFC2B90D688134849018222E7B8922EAF67CE79816EF468531EC2DE53BBD167,
    ),
    (
        0x0C3F050A6BF5AF151981E55E3E1A29A13C3FFA4550BD2514F1AFD6C5F721F830,
        0x0DEC54E6DBF75205FA75BA7992BD34F08B2EFE2ECD424A73EDA7784320A1A36E,
        0x1C482A25A729F5DF20225815034B196098364A11F4D988FB7CC75CF32D8136FA,
        0x2625CE48A7B39A4252732624E4AB94360812AC2FC9A14A5FB8B607AE9FD8514A,
        0x07F017A7EBD56DD086F7CD4FD710C509ED7EF8E300B9A8BB9FB9F28AF710251F,
    ),
    (
        0x2A20E3A4A0E57D92F97C9D6186C6C3EA7C5E55C20146259BE2F78C2CCC2E3595,
        0x1049F8210566B51FAAFB1E9A5D63C0EE701673AED820D9C4403B01FEB727A549,
        0x02ECAC687EF5B4B568002BD9D1B96B4BEF357A69E3E86B5561B9299B82D69C8E,
        0x2D3A1AEA2E6D44466808F88C9BA903D3BDCB6B58BA40441ED4EBCF11BBE1E37B,
        0x14074BB14C982C81C9AD171E4F35FE49B39C4A7A72DBB6D9C98D803BFED65E64,
    ),
)


def _to_hex(value: int) -> str:
    return f"0x{value:064x}"


def _grain_initial_state() -> int:
    """Seed the 80-bit LFSR from the instance parameters (bit i is tap i)."""
    fields = (
        (1, 2),  # prime field
        (0, 4),  # S-box x^alpha
        (FIELD_BITS, 12),
        (WIDTH, 12),
        (FULL_ROUNDS, 10),
        (PARTIAL_ROUNDS, 10),
    )
    bits = "".join(format(value, f"0{width}b") for value, width in fields)
    bits += "1" * 30
    return sum(int(bit) << index for index, bit in enumerate(bits))


def _grain_bits() -> Iterator[int]:
    """Yield the self-shrunk output of the Grain LFSR."""
    state = _grain_initial_state()
    top = _GRAIN_SIZE - 1

    def step() -> int:
        nonlocal state
        bit = bin(state & _GRAIN_MASK).count("1") & 1
        state = (state >> 1) | (bit << top)
        return bit

    for _ in range(_GRAIN_WARMUP):
        step()
    while True:
        if step():
            yield step()
        else:
            step()


@lru_cache(maxsize=None)
def _generate_round_constants() -> tuple[int, ...]:
    """Derive every round constant from the Grain LFSR by rejection sampling."""
    bits = _grain_bits()
    count = (FULL_ROUNDS + PARTIAL_ROUNDS) * WIDTH
    constants: list[int] = []
    while len(constants) < count:
        value = 0
        for _ in range(FIELD_BITS):
            value = (value << 1) | next(bits)
        if value < MODULUS:
            constants.append(value)
    return tuple(constants)


@lru_cache(maxsize=None)
def round_constants_raw() -> tuple[str, ...]:
    """Return all round constants as 0x-prefixed, 64-digit hex strings."""
    return tuple(_to_hex(value) for value in _generate_round_constants())


@lru_cache(maxsize=None)
def mds_raw() -> tuple[tuple[str, ...], ...]:
    """Return the 5x5 MDS matrix as rows of hex strings."""
    return tuple(tuple(_to_hex(value) for value in row) for row in _MDS)