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
from typing import Dict, Optional, Union
import logging
import os

from rand_ext.config import SeedPolicy, SessionConfig
from rand_ext.prng import EntropySource, RandomState, seed
from rand_ext.samplers import DEFAULT_MAX_ITERATIONS, DistributionType, Sampler, build_sampler

logger = logging.getLogger(__name__)


class RandomSession:
    """
    Owns the RandomState consumed by a sequence of draws.

    With SeedPolicy.PER_CALL every draw starts from freshly seeded state, the
    way the SQL-callable functions behave. With SeedPolicy.PER_SESSION the
    state is seeded on first use (unless one is supplied) and then advanced by
    each draw.

    A session is not safe to use from more than one thread; give each thread
    its own.
    """

    def __init__(
        self,
        policy: SeedPolicy = SeedPolicy.PER_CALL,
        max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS,
        entropy: EntropySource = os.urandom,
        state: Optional[RandomState] = None,
    ) -> None:
        self.policy = policy
        self._entropy = entropy
        self._state = state
        self._samplers: Dict[DistributionType, Sampler] = {d: build_sampler(d, max_iterations) for d in DistributionType}

    @classmethod
    def from_config(cls, config: SessionConfig, entropy: EntropySource = os.urandom) -> RandomSession:
        return cls(policy=config.policy, max_iterations=config.max_iterations, entropy=entropy)

    @property
    def state(self) -> RandomState:
        if self._state is None:
            self.reseed()
        assert self._state is not None
        return self._state

    def reseed(self) -> RandomState:
        self._state = seed(self._entropy)
        return self._state

    def draw(self, distribution: Union[DistributionType, str], min: int, max: int, parameter: float) -> int:
        sampler = self._samplers[DistributionType(distribution)]
        # invalid arguments are rejected before any entropy is consumed
        lb, ub, param = sampler.validate(min, max, parameter)
        if self.policy == SeedPolicy.PER_CALL:
            self.reseed()
        return sampler.draw(self.state, lb, ub, param)

    def random_exponential(self, lb: int, ub: int, parameter: float) -> int:
        return self.draw(DistributionType.EXPONENTIAL, lb, ub, parameter)

    def random_gaussian(self, lb: int, ub: int, parameter: float) -> int:
        return self.draw(DistributionType.GAUSSIAN, lb, ub, parameter)

    def random_zipfian(self, lb: int, ub: int, parameter: float) -> int:
        return self.draw(DistributionType.ZIPFIAN, lb, ub, parameter)


def random_exponential(lb: int, ub: int, parameter: float) -> int:
    """Returns a value of the exponential distribution over [lb, ub], reseeding from host entropy."""
    return RandomSession().random_exponential(lb, ub, parameter)


def random_gaussian(lb: int, ub: int, parameter: float) -> int:
    """Returns a value of the gaussian distribution over [lb, ub], reseeding from host entropy."""
    return RandomSession().random_gaussian(lb, ub, parameter)


def random_zipfian(lb: int, ub: int, parameter: float) -> int:
    """Returns a value of the zipfian distribution over [lb, ub], reseeding from host entropy."""
    return RandomSession().random_zipfian(lb, ub, parameter)
