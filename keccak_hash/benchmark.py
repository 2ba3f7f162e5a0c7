"""
Times keccak_hash.hash against pycryptodome's Keccak-256 on the same message.
"""

import argparse
import logging
import time
from dataclasses import dataclass

from Crypto.Hash import keccak

from .keccak256 import hash as keccak_hash

logger = logging.getLogger(__name__)

DEFAULT_ITERATIONS = 1234
DEFAULT_MESSAGE = b"Hello, Ethereum!"


@dataclass
class Benchmark_result:
    iterations: int
    own_time: float     # seconds, total
    lib_time: float
    own_hash: str
    lib_hash: str

    @property
    def own_avg_ms(self) -> float:
        return self.own_time / self.iterations * 1000

    @property
    def lib_avg_ms(self) -> float:
        return self.lib_time / self.iterations * 1000

    # positive when keccak_hash is faster than the library
    @property
    def speed_diff(self) -> float:
        if self.lib_time == 0:
            return 0.0
        return (self.lib_time - self.own_time) / self.lib_time * 100

    @property
    def hashes_match(self) -> bool:
        return self.own_hash == self.lib_hash


def lib_keccak_hash(data: bytes) -> str:
    return keccak.new(digest_bits=256, data=data).hexdigest()


def run_benchmark(iterations: int = DEFAULT_ITERATIONS, data: bytes = DEFAULT_MESSAGE) -> Benchmark_result:
    if iterations <= 0:
        raise ValueError(f"iterations must be positive, got {iterations}")

    # my implementation
    start_time = time.time()
    for _ in range(iterations):
        own_hash = keccak_hash(data)
    own_time = time.time() - start_time
    logger.info(f"keccak_hash: {iterations} hashes in {own_time:.6f}s")

    # lib implementation
    start_time = time.time()
    for _ in range(iterations):
        lib_hash = lib_keccak_hash(data)
    lib_time = time.time() - start_time
    logger.info(f"pycryptodome: {iterations} hashes in {lib_time:.6f}s")

    return Benchmark_result(iterations, own_time, lib_time, own_hash, lib_hash)


def format_result(result: Benchmark_result) -> str:
    verdict = "faster (keccak_hash)" if result.speed_diff > 0 else "slower (keccak_hash)"
    return "\n".join([
        f"Keccak Benchmark ({result.iterations} iterations)",
        "",
        "Results:",
        f"  keccak_hash.hash(): {result.own_time:.6f}s total ({result.own_avg_ms:.6f} ms/hash)",
        f"  pycryptodome:       {result.lib_time:.6f}s total ({result.lib_avg_ms:.6f} ms/hash)",
        f"  Speed difference:   {abs(result.speed_diff):.2f}% {verdict}",
        "",
        "Example Hash:",
        f"  keccak_hash.hash(): {result.own_hash}",
        f"  pycryptodome:       {result.lib_hash}",
    ])


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(prog='keccak-hash-benchmark',
                                     description='Compare keccak_hash with pycryptodome Keccak-256')
    parser.add_argument("-n", "--iterations", type=int, default=DEFAULT_ITERATIONS, help="number of hashes per implementation")
    parser.add_argument("-m", "--message", type=str, default=DEFAULT_MESSAGE.decode(), help="message to hash (UTF-8)")
    args = parser.parse_args(argv)
    if args.iterations <= 0:
        parser.error("iterations must be positive")

    logging.basicConfig(level=logging.INFO)
    result = run_benchmark(args.iterations, args.message.encode())
    print(format_result(result))

    if not result.hashes_match:
        logger.error("Digests differ between keccak_hash and pycryptodome")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
