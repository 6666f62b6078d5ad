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
import math

from rand_ext.errors import InvalidParameter
from rand_ext.prng import RandomState
from .base import DistributionType, Sampler, scale_to_range


class ExponentialSampler(Sampler, distribution=DistributionType.EXPONENTIAL):
    """
    Exponential distribution from min to max inclusive, by inverse-CDF sampling.

    The parameter is chosen so that the probability density at max is
    exp(-parameter) of the density at min.
    """

    def validate_parameter(self, parameter: float) -> None:
        if parameter <= 0.0:
            raise InvalidParameter(f"exponential parameter must be greater than 0.0 (not {parameter:f})")
        if 1.0 - math.exp(-parameter) == 0.0:
            raise InvalidParameter(f"exponential parameter is too close to 0.0 (not {parameter!r})")

    def draw(self, state: RandomState, min: int, max: int, parameter: float) -> int:
        cut = math.exp(-parameter)
        # erand48 is in [0, 1), uniform in (0, 1]
        uniform = 1.0 - state.next()

        # inner expression in (cut, 1], rand in [0, 1)
        rand = -math.log(cut + (1.0 - cut) * uniform) / parameter
        return scale_to_range(min, max, rand)
