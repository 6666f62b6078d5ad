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
import logging
import os
from typing import Callable

from rand_ext.errors import EntropyUnavailable
from .erand48 import RandomState

logger = logging.getLogger(__name__)

# Returns the requested number of bytes from a cryptographically strong source.
EntropySource = Callable[[int], bytes]

SEED_BYTES = 8


def seed(entropy: EntropySource = os.urandom) -> RandomState:
    """
    Builds a fresh RandomState from 64 bits of host entropy.

    Args:
        entropy: Strong randomness source, os.urandom by default.

    Returns:
        A RandomState holding the low 48 bits of the entropy as three words.

    Raises:
        EntropyUnavailable: If the source fails or returns a short read.
    """
    try:
        raw = entropy(SEED_BYTES)
    except (OSError, NotImplementedError) as e:
        raise EntropyUnavailable("could not generate random seed") from e
    if len(raw) != SEED_BYTES:
        raise EntropyUnavailable(f"could not generate random seed: expected {SEED_BYTES} bytes, got {len(raw)}")

    state = RandomState.from_seed(int.from_bytes(raw, "little"))
    logger.debug("Seeded random state with words %s", state.xseed)
    return state
