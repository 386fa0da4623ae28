# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""cronmath CLI — shift cron expressions from the command line."""

from __future__ import annotations

import json
from pathlib import Path

import click

from cronmath import __version__
from cronmath.adapters.calculate import calculate
from cronmath.adapters.operations import Operation
from cronmath.cli.console import console, print_diagnostic
from cronmath.core.config import Config
from cronmath.expression.cron import parse_expression
from cronmath.kernel.exceptions import CronMathException
from cronmath.kernel.types import Diagnostic
from cronmath.logging.structlog_adapter import StructlogAdapter


@click.group()
@click.version_option(version=__version__, prog_name="cronmath")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML or TOML file with a 'cronmath' section.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """cronmath — time arithmetic on 5-field cron expressions."""
    config = Config.from_file(config_path)
    StructlogAdapter().configure(config)
    ctx.obj = config


@cli.command("calc")
@click.argument("expression")
@click.option(
    "-o",
    "--op",
    "ops",
    nargs=3,
    multiple=True,
    type=(str, int, str),
    metavar="TYPE VALUE UNIT",
    help="Operation to apply, e.g. '-o add 30 minutes'. Repeatable.",
)
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON.")
def calc_command(expression: str, ops: tuple[tuple[str, int, str], ...], as_json: bool) -> None:
    """Apply add/sub operations to EXPRESSION and print the result."""
    operations = [Operation(type=op_type, value=value, unit=unit) for op_type, value, unit in ops]
    try:
        result = calculate(expression, operations)
    except CronMathException as exc:
        print_diagnostic(Diagnostic.from_exception(exc))
        raise SystemExit(1) from exc

    if as_json:
        click.echo(json.dumps({"id": result.id, "input": result.input, "result": result.result}))
    else:
        console.print(result.result)


@cli.command("check")
@click.argument("expression")
def check_command(expression: str) -> None:
    """Validate EXPRESSION and print its canonical form."""
    try:
        parsed = parse_expression(expression)
    except CronMathException as exc:
        print_diagnostic(Diagnostic.from_exception(exc))
        raise SystemExit(1) from exc
    console.print(str(parsed))
