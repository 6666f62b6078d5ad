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
from pydantic import BaseModel, Field, model_validator
from typing import Any, Dict, List, Optional
from enum import Enum
import yaml
import logging

from rand_ext.samplers import DEFAULT_MAX_ITERATIONS, DistributionType, build_sampler


class SeedPolicy(Enum):
    # Reseed from host entropy before every draw
    PER_CALL = "per_call"
    # Seed lazily on first draw, then keep advancing the same state
    PER_SESSION = "per_session"


DEFAULT_PARAMETERS: Dict[DistributionType, float] = {
    DistributionType.EXPONENTIAL: 1.0,
    DistributionType.GAUSSIAN: 2.5,
    DistributionType.ZIPFIAN: 1.1,
}


class SessionConfig(BaseModel):
    policy: SeedPolicy = SeedPolicy.PER_CALL
    max_iterations: Optional[int] = Field(default=DEFAULT_MAX_ITERATIONS, ge=1)


# Describes one stream of draws, e.g. the keys touched by a benchmark client.
class WorkloadConfig(BaseModel):
    name: str = "default"
    type: DistributionType = DistributionType.ZIPFIAN
    min: int = 1
    max: int = 1000
    parameter: Optional[float] = None
    total_count: int = Field(default=1000, ge=1)

    @model_validator(mode="after")
    def check_domain(self) -> "WorkloadConfig":
        if self.parameter is None:
            self.parameter = DEFAULT_PARAMETERS[self.type]
        # InvalidParameter is a ValueError, so pydantic reports it as a validation error
        build_sampler(self.type).validate(self.min, self.max, self.parameter)
        return self


class ReportConfig(BaseModel):
    summary: bool = True
    top_n: Optional[int] = Field(default=None, ge=1)


class Config(BaseModel):
    session: SessionConfig = SessionConfig()
    workloads: List[WorkloadConfig] = [WorkloadConfig()]
    report: ReportConfig = ReportConfig()


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    result = base.copy()
    for k, v in override.items():
        if k in result and isinstance(result[k], dict) and isinstance(v, dict):
            result[k] = deep_merge(result[k], v)
        else:
            result[k] = v
    return result


def read_config(config_file: str) -> Config:
    logger = logging.getLogger(__name__)
    logger.info("Using configuration from: %s", config_file)
    with open(config_file, "r") as stream:
        cfg = yaml.safe_load(stream) or {}

    default_cfg = Config().model_dump(mode="json")
    merged_cfg = deep_merge(default_cfg, cfg)

    logger.info(
        "Sampling with the following config:\n\n%s\n", yaml.dump(merged_cfg, sort_keys=False, default_flow_style=False)
    )
    return Config(**merged_cfg)
