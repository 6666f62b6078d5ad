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
from __future__ import annotations
from typing import Optional
import math

from rand_ext.errors import InvalidParameter
from rand_ext.prng import RandomState
from .base import DistributionType, Sampler

MIN_ZIPFIAN_PARAM = 1.001
MAX_ZIPFIAN_PARAM = 1000.0


def _candidate(u: float, s: float) -> Optional[float]:
    # u == 0.0 or an overflowing power is an infinite candidate, always out of bounds
    if u == 0.0:
        return None
    try:
        return float(math.floor(math.pow(u, -1.0 / (s - 1.0))))
    except OverflowError:
        return None


class ZipfianSampler(Sampler, distribution=DistributionType.ZIPFIAN):
    """
    Zipfian distribution from min to max inclusive, using the rejection method
    from "Non-Uniform Random Variate Generation", Luc Devroye, p. 550-551,
    Springer 1986.

    Draws from the unbounded Zipf law and rejects values above the range size,
    which is exact for the truncated law. The loop gets slow as s approaches
    1.0, hence the 1.001 floor.
    """

    def validate_parameter(self, parameter: float) -> None:
        if parameter < MIN_ZIPFIAN_PARAM or parameter > MAX_ZIPFIAN_PARAM:
            raise InvalidParameter(
                f"zipfian parameter must be in range [{MIN_ZIPFIAN_PARAM:.3f}, {MAX_ZIPFIAN_PARAM:.0f}] (not {parameter:f})"
            )

    def draw(self, state: RandomState, min: int, max: int, parameter: float) -> int:
        n = max - min + 1
        # a single value needs no draws
        if n <= 1:
            return min
        return min - 1 + self.compute_iterative_zipfian(state, n, parameter)

    def compute_iterative_zipfian(self, state: RandomState, n: int, s: float) -> int:
        b = math.pow(2.0, s - 1.0)
        attempts = 0
        while True:
            u = state.next()
            v = state.next()

            x = _candidate(u, s)
            if x is not None:
                t = math.pow(1.0 + 1.0 / x, s - 1.0)
                # reject if too large or out of bound
                if v * x * (t - 1.0) / (b - 1.0) <= t / b and x <= n:
                    return int(x)
            attempts += 1
            self.check_iterations(attempts)
