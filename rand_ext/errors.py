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


class RandExtError(Exception):
    """Base class for errors raised by the random-variate generators."""


class EntropyUnavailable(RandExtError, RuntimeError):
    """The host could not supply strong randomness to seed a RandomState."""


class InvalidParameter(RandExtError, ValueError):
    """A range or distribution parameter is outside its documented domain."""


class DistributionError(RandExtError, RuntimeError):
    """A rejection loop gave up after exceeding its iteration cap."""

    def __init__(self, distribution: str, iterations: int) -> None:
        super().__init__(f"{distribution} sampler did not accept a candidate after {iterations} iterations")
        self.distribution = distribution
        self.iterations = iterations
