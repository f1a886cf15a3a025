"""Top-level code that builds a prediction and handles errors.

The main() method is called by the package entrypoint code in __main__.py.

Copyright (C) 2025 Paulo Ferreira de Castro

Licensed under the Open Software License version 3.0, a copy of which can be
found in the LICENSE file.
"""

import json
import logging
from typing import Any

from .algo.error import PredictionError
from .algo.linear_regression import RegressionPredictor, RegressionResult
from .cmdline_parser import CmdArgs, parse_command_line
from .config.schema import ConfigError, CoreConfig, load_config_file, validate_config

_LOGGER = logging.getLogger(__name__)


def _load_config(args: CmdArgs) -> CoreConfig:
    config_obj: dict[str, Any] = {}
    if args.config_file:
        config_obj = load_config_file(args.config_file)
    return validate_config(config_obj, CoreConfig)


def _configure_logging():
    # Until the configuration is loaded, log at the INFO level.
    logging.basicConfig(
        format="%(asctime)s %(levelname)-8s [%(name)s] %(message)s",
        level=logging.INFO,
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def run(args: CmdArgs) -> RegressionResult:
    config = _load_config(args)
    logging.getLogger().setLevel(config.log_level)
    data = json.loads(args.dataset)
    predictor = RegressionPredictor(args.query_value, data, config.predictor)
    _LOGGER.info(
        "Building prediction for x=%s from %d observations",
        predictor.x,
        predictor.count,
    )
    return predictor.build()


def main(argv: list[str] | None = None) -> int:
    _configure_logging()
    args = parse_command_line(argv)

    exit_code = 0
    try:
        result = run(args)
        print(json.dumps(result.as_dict()))

    except (
        ConfigError,
        PredictionError,
        json.JSONDecodeError,
        FileNotFoundError,
    ) as e:
        exit_code = 1
        _LOGGER.error("%s: %s", type(e).__name__, e)

    except Exception:  # pylint: disable=broad-exception-caught
        exit_code = 2
        _LOGGER.exception("Exiting with an unexpected error")

    return exit_code
