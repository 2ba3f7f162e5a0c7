from numpy import uint64

from keccak_hash.state import Keccak_state, STATE_BYTES


def test_new_state_is_zero():
    state = Keccak_state()
    assert bytes(state) == bytes(STATE_BYTES)
    assert state.lanes.shape == (5, 5)


def test_lanes_are_little_endian():
    state = Keccak_state()
    state.set_lane(1, 0, uint64(0x0102030405060708))
    assert state.read_bytes(16)[8:] == bytes([8, 7, 6, 5, 4, 3, 2, 1])


def test_lane_index_is_x_plus_5y():
    state = Keccak_state()
    state.set_lane(3, 2, uint64(0xFF))
    assert bytes(state)[8 * (3 + 5 * 2)] == 0xFF
    assert state.get_lane(3, 2) == 0xFF
    assert state.get_lane(2, 3) == 0


def test_xor_bytes_and_lanes_share_memory():
    state = Keccak_state()
    state.xor_bytes(b"\xAA" * 10 + b"\x01\x02\x03", 10, 3)
    assert state.read_bytes(4) == b"\x01\x02\x03\x00"
    assert state.get_lane(0, 0) == 0x030201

    state.xor_lane(0, 0, uint64(0x030201))
    state.xor_byte(199, 0x80)
    assert bytes(state) == bytes(199) + b"\x80"


def test_states_are_independent():
    first, second = Keccak_state(), Keccak_state()
    first.xor_byte(0, 1)
    assert bytes(second) == bytes(STATE_BYTES)
