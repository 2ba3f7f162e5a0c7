"""
Keccak-256 (Ethereum flavour) on top of a generic Keccak-f[1600] sponge.
"""

from .errors import InvalidParameter
from .sponge import sponge_hash
from .keccak256 import Keccak_params, KECCAK_256, keccak_256, hash

__all__ = [
    'InvalidParameter',
    'sponge_hash',
    'Keccak_params',
    'KECCAK_256',
    'keccak_256',
    'hash',
]
