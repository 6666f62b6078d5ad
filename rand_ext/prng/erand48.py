# Copyright 2025 The Kubernetes Authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
import math
from dataclasses import dataclass, field
from typing import List

RAND48_MULT = 0x0005DEECE66D
RAND48_ADD = 0x000B
RAND48_MASK = (1 << 48) - 1


def _dorand48(xseed: List[int]) -> int:
    # xseed[0] holds the low-order word
    x = (xseed[2] << 32) | (xseed[1] << 16) | xseed[0]
    x = (x * RAND48_MULT + RAND48_ADD) & RAND48_MASK
    xseed[0] = x & 0xFFFF
    xseed[1] = (x >> 16) & 0xFFFF
    xseed[2] = (x >> 32) & 0xFFFF
    return x


def erand48(xseed: List[int]) -> float:
    """
    Advances the three-word seed in place and returns a double in [0, 1).

    The 48-bit state fits in a double's mantissa, so the scaling is exact.
    """
    return math.ldexp(float(_dorand48(xseed)), -48)


@dataclass
class RandomState:
    """
    48-bit linear congruential generator state, stored as three 16-bit words.

    A RandomState belongs to exactly one session and must not be shared
    between threads.
    """

    xseed: List[int] = field(default_factory=lambda: [0, 0, 0])

    def __post_init__(self) -> None:
        self.xseed = list(self.xseed)
        if len(self.xseed) != 3:
            raise ValueError(f"RandomState requires exactly 3 seed words, got {len(self.xseed)}")
        for word in self.xseed:
            if not 0 <= word <= 0xFFFF:
                raise ValueError(f"Seed word out of 16-bit range: {word}")

    @classmethod
    def from_seed(cls, iseed: int) -> "RandomState":
        # Only the low-order 48 bits of the seed are kept
        return cls([iseed & 0xFFFF, (iseed >> 16) & 0xFFFF, (iseed >> 32) & 0xFFFF])

    def next(self) -> float:
        return erand48(self.xseed)

    def copy(self) -> "RandomState":
        return RandomState(list(self.xseed))
