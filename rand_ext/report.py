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
from typing import Any, List, Optional
from pydantic import BaseModel
from numpy.typing import NDArray
import numpy as np
import logging

from rand_ext.config import Config, ReportConfig, WorkloadConfig
from rand_ext.session import RandomSession
from rand_ext.utils.distribution import generate_distribution

logger = logging.getLogger(__name__)


def summarize(items: Any) -> Optional[dict[str, float]]:
    return (
        {
            "mean": float(np.mean(items)),
            "min": float(np.min(items)),
            "p10": float(np.percentile(items, 10)),
            "p50": float(np.percentile(items, 50)),
            "p90": float(np.percentile(items, 90)),
            "max": float(np.max(items)),
        }
        if len(items) != 0
        else None
    )


def top_values(items: Any, n: int) -> List[dict[str, int]]:
    """The n most frequent values, most frequent first; ties go to the smaller value."""
    values, counts = np.unique(np.asarray(items), return_counts=True)
    order = np.argsort(-counts, kind="stable")[:n]
    return [{"value": int(values[i]), "count": int(counts[i])} for i in order]


class WorkloadReport(BaseModel):
    name: str
    type: str
    min: int
    max: int
    parameter: float
    count: int
    summary: Optional[dict[str, float]] = None
    top_values: Optional[List[dict[str, int]]] = None


def report_workload(workload: WorkloadConfig, values: NDArray[np.int64], report_config: ReportConfig) -> WorkloadReport:
    assert workload.parameter is not None
    return WorkloadReport(
        name=workload.name,
        type=workload.type.value,
        min=workload.min,
        max=workload.max,
        parameter=workload.parameter,
        count=len(values),
        summary=summarize(values) if report_config.summary else None,
        top_values=top_values(values, report_config.top_n) if report_config.top_n else None,
    )


def generate_report(config: Config, session: Optional[RandomSession] = None) -> dict[str, Any]:
    if session is None:
        session = RandomSession.from_config(config.session)

    workloads = []
    for workload in config.workloads:
        assert workload.parameter is not None
        logger.info(f"Drawing {workload.total_count} {workload.type.value} values for workload '{workload.name}'")
        values = generate_distribution(
            workload.type, workload.min, workload.max, workload.parameter, workload.total_count, session
        )
        workloads.append(report_workload(workload, values, config.report).model_dump(exclude_none=True))

    return {"seed_policy": config.session.policy.value, "workloads": workloads}
