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
from typing import Optional

from rand_ext.prng import RandomState
from .base import DEFAULT_MAX_ITERATIONS, DistributionType, Sampler, build_sampler
from .exponential import ExponentialSampler
from .gaussian import MIN_GAUSSIAN_PARAM, GaussianSampler
from .zipfian import MAX_ZIPFIAN_PARAM, MIN_ZIPFIAN_PARAM, ZipfianSampler


def exponential(
    state: RandomState, min: int, max: int, parameter: float, max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS
) -> int:
    return build_sampler(DistributionType.EXPONENTIAL, max_iterations).sample(state, min, max, parameter)


def gaussian(
    state: RandomState, min: int, max: int, parameter: float, max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS
) -> int:
    return build_sampler(DistributionType.GAUSSIAN, max_iterations).sample(state, min, max, parameter)


def zipfian(state: RandomState, min: int, max: int, s: float, max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS) -> int:
    return build_sampler(DistributionType.ZIPFIAN, max_iterations).sample(state, min, max, s)


__all__ = [
    "DEFAULT_MAX_ITERATIONS",
    "DistributionType",
    "ExponentialSampler",
    "GaussianSampler",
    "MAX_ZIPFIAN_PARAM",
    "MIN_GAUSSIAN_PARAM",
    "MIN_ZIPFIAN_PARAM",
    "Sampler",
    "ZipfianSampler",
    "build_sampler",
    "exponential",
    "gaussian",
    "zipfian",
]
