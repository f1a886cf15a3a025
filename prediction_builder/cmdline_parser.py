"""Command-line argument parser.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import argparse
from dataclasses import dataclass


@dataclass
class CmdArgs:
    query_value: str
    dataset: str
    config_file: str | None = None


def get_package_name() -> str:
    from os.path import abspath, basename, dirname

    return basename(dirname(abspath(__file__)))


def parse_command_line(argv: list[str] | None = None) -> CmdArgs:
    parser = argparse.ArgumentParser(
        prog=get_package_name(),
        description="Predict y for a given x using a linear regression over a dataset.",
    )
    parser.add_argument(
        "-x",
        "--query-value",
        default="0",
        help="Value of x to predict y for (non-numeric values are treated as 0)",
    )
    parser.add_argument(
        "-d",
        "--dataset",
        required=True,
        help="JSON array of [x, y] observations, e.g. '[[1,20],[2,70],[3,81]]'",
    )
    parser.add_argument(
        "-c",
        "--config-file",
        help="TOML configuration file path",
    )
    args = CmdArgs(**vars(parser.parse_args(argv)))

    return args
