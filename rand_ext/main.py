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
from argparse import ArgumentParser
from typing import List, Optional
import json
import logging

from rand_ext.config import DEFAULT_PARAMETERS, SeedPolicy, read_config
from rand_ext.errors import InvalidParameter, RandExtError
from rand_ext.logger import setup_logging
from rand_ext.report import generate_report
from rand_ext.samplers import DistributionType, build_sampler
from rand_ext.session import RandomSession
from rand_ext.utils import generate_distribution

logger = logging.getLogger(__name__)


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="rand-ext", description="Draw bounded integers from skewed distributions.")
    parser.add_argument("-c", "--config_file", help="Config File", required=False)
    parser.add_argument(
        "-t", "--type", help="Distribution to draw ad-hoc values from", choices=[d.value for d in DistributionType]
    )
    parser.add_argument("--min", help="Smallest value of the range", type=int, default=1)
    parser.add_argument("--max", help="Largest value of the range", type=int, default=1000)
    parser.add_argument("-p", "--parameter", help="Distribution parameter", type=float, default=None)
    parser.add_argument("-n", "--count", help="Number of values to draw", type=int, default=1)
    parser.add_argument(
        "--seed-policy",
        help="When to reseed from host entropy",
        default=SeedPolicy.PER_CALL.value,
        choices=[p.value for p in SeedPolicy],
    )
    parser.add_argument("-o", "--output", help="Also write the JSON report to this file", required=False)
    parser.add_argument(
        "--log-level", help="Logging level", default="WARNING", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    )
    return parser


def main_cli(argv: Optional[List[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)

    if args.config_file and args.type:
        parser.error("argument -c/--config_file not allowed with argument -t/--type")
    if not args.config_file and not args.type:
        parser.error("one of the arguments -c/--config_file -t/--type is required")

    try:
        if args.type:
            if args.output:
                parser.error("argument -o/--output requires -c/--config_file")
            if args.count <= 0:
                parser.error("argument -n/--count must be a positive integer")
            distribution = DistributionType(args.type)
            parameter = args.parameter if args.parameter is not None else DEFAULT_PARAMETERS[distribution]
            try:
                build_sampler(distribution).validate(args.min, args.max, parameter)
            except InvalidParameter as e:
                parser.error(str(e))

            session = RandomSession(policy=SeedPolicy(args.seed_policy))
            values = generate_distribution(distribution, args.min, args.max, parameter, args.count, session)
            for value in values:
                print(int(value))
            return

        config = read_config(args.config_file)
        report = generate_report(config)
    except RandExtError as e:
        logger.error("Sampling failed: %s", e)
        parser.exit(1, f"{parser.prog}: error: {e}\n")

    payload = json.dumps(report, indent=2)
    print(payload)
    if args.output:
        with open(args.output, "w") as f:
            f.write(payload + "\n")
        logger.info("Report written to %s", args.output)


if __name__ == "__main__":
    main_cli()
