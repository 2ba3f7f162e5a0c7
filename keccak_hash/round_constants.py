"""
Round constants of Keccak-f[1600], generated bit by bit from the LFSR
with polynomial x^8 + x^6 + x^5 + x^4 + 1.
"""

ROUNDS = 24

LFSR_START = 0x01
LFSR_FEEDBACK = 0x71

# round constant bits sit at positions 2**j - 1
BIT_POSITIONS = [(1 << j) - 1 for j in range(7)]


# returns (next cursor, output bit)
def lfsr86540(cursor: int) -> (int, int):
    shifted = (cursor << 1) & 0xFF
    if cursor & 0x80:
        shifted ^= LFSR_FEEDBACK
    return shifted, (shifted & 0b10) >> 1


def round_constants(rounds: int = ROUNDS) -> list[int]:
    constants = []
    cursor = LFSR_START
    for _ in range(rounds):
        rc = 0
        for position in BIT_POSITIONS:
            cursor, bit = lfsr86540(cursor)
            rc |= bit << position
        constants.append(rc)
    return constants
