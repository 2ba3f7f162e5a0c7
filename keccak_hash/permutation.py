"""
Keccak-f[1600]: 24 rounds of theta, rho+pi, chi and iota over a Keccak_state.
"""

from numpy import uint64, left_shift, right_shift, bitwise_or, bitwise_xor, roll

from .round_constants import ROUNDS, LFSR_START, BIT_POSITIONS, lfsr86540
from .state import Keccak_state, LANE_BITS


#----------UTILITY FUNCTIONS----------
# left cyclic shift of a 64-bit lane (or array of lanes) by 'shift' bits
def rotl(a, shift: int):
    shift %= LANE_BITS
    if shift == 0: # a uint64 shift by 64 is undefined
        return a
    return bitwise_or(left_shift(a, uint64(shift)), right_shift(a, uint64(LANE_BITS - shift)))

#----------STEPS----------
def theta(state: Keccak_state) -> None:
    A = state.lanes
    C = bitwise_xor.reduce(A, axis=0)           # column parities, C[x]
    D = roll(C, 1) ^ rotl(roll(C, -1), 1)       # C[x-1] ^ rotl(C[x+1], 1)
    A ^= D                                      # broadcast over every row y


def rho_pi(state: Keccak_state) -> None:
    x, y = 1, 0
    r = 0
    carried = state.get_lane(x, y)
    for j in range(24):
        r += j + 1
        x, y = y, (2 * x + 3 * y) % 5
        displaced = state.get_lane(x, y)
        state.set_lane(x, y, rotl(carried, r))
        carried = displaced


def chi(state: Keccak_state) -> None:
    A = state.lanes
    # rolls copy, so every row is computed from its original values
    A ^= ~roll(A, -1, axis=1) & roll(A, -2, axis=1)


def iota(state: Keccak_state, cursor: int) -> int:
    rc = uint64(0)
    for position in BIT_POSITIONS:
        cursor, bit = lfsr86540(cursor)
        rc ^= left_shift(uint64(bit), uint64(position))
    state.xor_lane(0, 0, rc)
    return cursor

#----------PERMUTATION----------
def keccak_f1600(state: Keccak_state) -> None:
    cursor = LFSR_START
    for _ in range(ROUNDS):
        theta(state)
        rho_pi(state)
        chi(state)
        cursor = iota(state, cursor)
