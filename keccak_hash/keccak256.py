"""
Keccak-256 as used by Ethereum: Keccak[r=1088, c=512] with suffix 0x01
(SHA3-256 uses the same rate but suffix 0x06).
"""

from dataclasses import dataclass

from .sponge import sponge_hash, check_parameters


@dataclass(frozen=True)
class Keccak_params:
    rate: int           # bits
    capacity: int       # bits
    suffix: int         # domain separation byte
    output_bytes: int

    def __post_init__(self):
        check_parameters(self.rate, self.capacity, self.suffix, self.output_bytes)

    def digest(self, data) -> bytes:
        return sponge_hash(self.rate, self.capacity, data, self.suffix, self.output_bytes)


KECCAK_256 = Keccak_params(rate=1088, capacity=512, suffix=0x01, output_bytes=32)


def keccak_256(data) -> bytes:
    return KECCAK_256.digest(data)


def hash(data, raw_output: bool = False):
    """
    Keccak-256 of data: 32 raw bytes if raw_output, else 64 lowercase hex characters.
    """
    digest = keccak_256(data)
    if raw_output:
        return digest
    return digest.hex()
