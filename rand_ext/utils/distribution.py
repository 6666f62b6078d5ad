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
import numpy as np
from numpy.typing import NDArray
from typing import Optional, Union

from rand_ext.samplers import DistributionType
from rand_ext.session import RandomSession


def generate_distribution(
    distribution: Union[DistributionType, str],
    min: int,
    max: int,
    parameter: float,
    total_count: int,
    session: Optional[RandomSession] = None,
) -> NDArray[np.int64]:
    """
    Generates an array of integers drawn from the given distribution.

    Args:
        distribution: Which sampler to draw from.
        min: The minimum allowed value.
        max: The maximum allowed value.
        parameter: The distribution-shaping parameter.
        total_count: The total number of values to generate.
        session: Session to draw from; a new per-call session when omitted.

    Returns:
        A numpy array of int64 values within [min, max].

    Raises:
        ValueError: If constraints are impossible (e.g., min > max).
    """
    if min > max:
        raise ValueError("Minimum value cannot be greater than maximum value.")
    if total_count <= 0:
        raise ValueError("Total count must be a positive integer.")

    if session is None:
        session = RandomSession()

    values = np.empty(total_count, dtype=np.int64)
    for i in range(total_count):
        values[i] = session.draw(distribution, min, max, parameter)
    return values
