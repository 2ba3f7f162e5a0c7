"""
Keccak sponge construction over Keccak-f[1600]: absorb, multi-rate padding, squeeze.
"""

import logging

from .errors import InvalidParameter
from .permutation import keccak_f1600
from .state import Keccak_state, STATE_BYTES

logger = logging.getLogger(__name__)

WIDTH = STATE_BYTES * 8 # b = 1600 bits
FINAL_BIT = 0x80        # last bit of pad10*1, always in the last byte of the rate


def check_parameters(rate: int, capacity: int, suffix: int = 0x01, output_length: int = 0) -> None:
    if rate <= 0 or rate % 8 != 0:
        problem = f"rate must be a positive multiple of 8, got {rate}"
    elif rate >= WIDTH:
        problem = f"rate must be below {WIDTH} bits, got {rate}"
    elif rate + capacity != WIDTH:
        problem = f"rate + capacity must be {WIDTH} bits, got {rate} + {capacity}"
    elif not 0 <= suffix <= 0xFF:
        problem = f"suffix must fit in one byte, got {suffix:#x}"
    elif output_length < 0:
        problem = f"output length must be non-negative, got {output_length}"
    else:
        return
    logger.debug(f"Rejected sponge parameters: {problem}")
    raise InvalidParameter(problem)


def sponge_hash(rate: int, capacity: int, data, suffix: int, output_length: int) -> bytes:
    """
    Keccak[r, c] over data with the given domain suffix, squeezed to output_length bytes.

    rate and capacity are in bits, suffix is the byte XORed in at the padding
    offset (0x01 Keccak, 0x06 SHA-3, 0x1F SHAKE).
    """
    check_parameters(rate, capacity, suffix, output_length)

    state = Keccak_state()
    block_bytes = rate // 8
    permutations = 0

    data = memoryview(data).cast('B')
    in_len = len(data)
    pos = 0
    b = 0

#----------ABSORBING----------
    while in_len > 0:
        b = min(in_len, block_bytes)
        state.xor_bytes(data, pos, b)
        pos += b
        in_len -= b

        if b == block_bytes:
            keccak_f1600(state)
            permutations += 1
            b = 0

#----------PADDING----------
    state.xor_byte(b, suffix)
    # the suffix already uses the final bit of this block, so pad10*1 needs a fresh one
    if (suffix & 0x80) and b == block_bytes - 1:
        keccak_f1600(state)
        permutations += 1
    state.xor_byte(block_bytes - 1, FINAL_BIT)
    keccak_f1600(state)
    permutations += 1

#----------SQUEEZING----------
    out = bytearray()
    out_len = output_length
    while out_len > 0:
        b = min(out_len, block_bytes)
        out += state.read_bytes(b)
        out_len -= b

        if out_len > 0:
            keccak_f1600(state)
            permutations += 1

    logger.debug(f"Keccak[r={rate}, c={capacity}] suffix={suffix:#04x}: "
                 f"{len(data)} bytes in, {output_length} bytes out, {permutations} permutations")
    return bytes(out)
