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
from abc import ABCMeta, abstractmethod
from enum import Enum
from typing import Any, Dict, Optional, Tuple, Type
import logging
import math
import numbers

from rand_ext.errors import DistributionError, InvalidParameter
from rand_ext.prng import RandomState

logger = logging.getLogger(__name__)

INT64_MIN = -(1 << 63)
INT64_MAX = (1 << 63) - 1

# Safety valve for the rejection loops; None disables it.
DEFAULT_MAX_ITERATIONS = 1_000_000


class DistributionType(Enum):
    EXPONENTIAL = "exponential"
    GAUSSIAN = "gaussian"
    ZIPFIAN = "zipfian"


sampler_implementations: Dict[DistributionType, type] = {}


class SamplerMeta(ABCMeta):
    def __new__(
        mcs: Type[SamplerMeta],
        name: str,
        bases: Tuple[type, ...],
        dct: Dict[str, Any],
        distribution: Optional[DistributionType] = None,
    ) -> type:
        cls = super().__new__(mcs, name, bases, dct)
        if distribution:
            if distribution in sampler_implementations:
                raise ValueError(f'Sampler for "{distribution.value}" already registered')
            sampler_implementations[distribution] = cls
            setattr(cls, "distribution", distribution)
        elif name != "Sampler":
            raise TypeError(f"Sampler class {name} must have a distribution to register")
        return cls


def validate_range(min: Any, max: Any) -> Tuple[int, int]:
    for bound in (min, max):
        if isinstance(bound, bool) or not isinstance(bound, numbers.Integral):
            raise InvalidParameter(f"range bounds must be integers (not {bound!r})")
        if not INT64_MIN <= bound <= INT64_MAX:
            raise InvalidParameter(f"range bound {bound} does not fit in a 64-bit signed integer")
    if min > max:
        raise InvalidParameter(f"minimum value cannot be greater than maximum value ({min} > {max})")
    return int(min), int(max)


def scale_to_range(min: int, max: int, rand: float) -> int:
    """Maps rand in [0, 1) onto the inclusive integer range [min, max]."""
    value = min + int((max - min + 1) * rand)
    # rand may round up to 1.0, which would land one past the top
    return value if value <= max else max


class Sampler(metaclass=SamplerMeta):
    """
    Draws one bounded integer from a non-uniform distribution.

    Subclasses register themselves for a DistributionType through the
    `distribution` class keyword and implement parameter validation plus the
    transform from uniform draws to an integer in [min, max].
    """

    distribution: DistributionType

    def __init__(self, max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS) -> None:
        if max_iterations is not None and max_iterations < 1:
            raise ValueError(f"max_iterations must be positive, got {max_iterations}")
        self.max_iterations = max_iterations

    def validate(self, min: Any, max: Any, parameter: Any) -> Tuple[int, int, float]:
        lb, ub = validate_range(min, max)
        if isinstance(parameter, bool) or not isinstance(parameter, numbers.Real):
            raise InvalidParameter(f"{self.distribution.value} parameter must be a number (not {parameter!r})")
        param = float(parameter)
        if not math.isfinite(param):
            raise InvalidParameter(f"{self.distribution.value} parameter must be finite (not {param})")
        self.validate_parameter(param)
        return lb, ub, param

    def sample(self, state: RandomState, min: int, max: int, parameter: float) -> int:
        """Validates the arguments, then draws from state."""
        lb, ub, param = self.validate(min, max, parameter)
        return self.draw(state, lb, ub, param)

    def check_iterations(self, attempts: int) -> None:
        if self.max_iterations is not None and attempts >= self.max_iterations:
            logger.warning("%s sampler rejected %d candidates in a row", self.distribution.value, attempts)
            raise DistributionError(self.distribution.value, attempts)

    @abstractmethod
    def validate_parameter(self, parameter: float) -> None: ...

    @abstractmethod
    def draw(self, state: RandomState, min: int, max: int, parameter: float) -> int:
        """Draws without validating; arguments must already be in domain."""
        raise NotImplementedError


def build_sampler(distribution: DistributionType | str, max_iterations: Optional[int] = DEFAULT_MAX_ITERATIONS) -> Sampler:
    distribution = DistributionType(distribution)
    if distribution in sampler_implementations:
        sampler: Sampler = sampler_implementations[distribution](max_iterations=max_iterations)
        return sampler
    raise ValueError(f"Unknown distribution: {distribution}")
