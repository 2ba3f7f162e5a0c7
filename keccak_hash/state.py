"""
1600-bit Keccak state: 200 bytes seen as a 5x5 matrix of 64-bit lanes.
"""

from numpy import uint8, uint64, zeros, frombuffer, dtype
import numpy.typing as npt

STATE_BYTES = 200
LANE_BYTES = 8
LANE_BITS = 64

# lanes are little-endian regardless of the host byte order
LANE_DTYPE = dtype('<u8')


class Keccak_state:
    # buffer is the only storage; lanes is a view onto the same memory, so writing
    # through either one is visible in the other
    def __init__(self) -> None:
        self.buffer: npt.NDArray[uint8] = zeros(STATE_BYTES, uint8)
        self.lanes: npt.NDArray[uint64] = self.buffer.view(LANE_DTYPE).reshape(5, 5) # lanes[y][x]

#----------LANE ACCESS----------
    def get_lane(self, x: int, y: int) -> uint64:
        return self.lanes[y, x]

    def set_lane(self, x: int, y: int, lane: uint64) -> None:
        self.lanes[y, x] = lane

    def xor_lane(self, x: int, y: int, lane: uint64) -> None:
        self.lanes[y, x] ^= lane

#----------BYTE ACCESS----------
    # XOR data[start:start+length] into the state beginning at byte 0
    def xor_bytes(self, data, start: int, length: int) -> None:
        self.buffer[:length] ^= frombuffer(data, uint8, count=length, offset=start)

    def xor_byte(self, offset: int, value: int) -> None:
        self.buffer[offset] ^= uint8(value)

    def read_bytes(self, length: int) -> bytes:
        return self.buffer[:length].tobytes()

    def __bytes__(self) -> bytes:
        return self.buffer.tobytes()
