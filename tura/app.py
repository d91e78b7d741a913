# tura/app.py

import argparse
import sys

from rich.console import Console
from rich.markup import escape

from tura.config.config_loader import load_config
from tura.errors import ArgumentError, TuraError, TuraIOError
from tura.logger.logger import JSONLogger
from tura.simulator.parser import parse_rules_source, parse_tape_source
from tura.simulator.turing_machine import Machine, TapeConfig

console = Console(stderr=True)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message):
        raise ArgumentError(message)


def build_parser():
    parser = _ArgumentParser(prog="tura", description="Run a .tura Turing machine and print every configuration.")
    parser.add_argument("source", nargs="?", help="Rule file (STATE READ WRITE STEP NEXT per rule)")
    parser.add_argument("tape", nargs="?", help="Initial tape file; the tape grows to the right when given")
    parser.add_argument("--config", help="Path to a JSON runtime config")
    parser.add_argument("--log", action="store_true", help="Write a JSON-lines run log")
    parser.add_argument("--quiet", action="store_true", help="Do not print configurations")
    return parser


# === Utilities ===
def read_source(path):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise TuraIOError(path, e) from e


def load_machine(source_path, tape_path, config):
    """Parse the rule file and build the machine for either tape variant."""
    rules = parse_rules_source(read_source(source_path))
    if tape_path is None:
        tape_config = TapeConfig.fixed(config["default_tape"])
    else:
        tape_config = TapeConfig.auto_extend(parse_tape_source(read_source(tape_path)))
    return rules, Machine(tape_config)


def run(args, config, run_logger=None):
    rules, machine = load_machine(args.source, args.tape, config)

    on_step = None
    if run_logger is not None:
        run_logger.log_run_start(args.source, args.tape, machine, len(rules))
        on_step = run_logger.log_step

    emit = (lambda text: None) if args.quiet else print
    steps = machine.run(rules, emit=emit, on_step=on_step)

    if run_logger is not None:
        run_logger.log_halt(steps, machine)
    return steps


def main(argv=None):
    parser = build_parser()
    run_logger = None
    try:
        args = parser.parse_args(argv)
        if args.source is None:
            raise ArgumentError("expected source file")

        config = load_config(args.config)
        if args.log or config["log_enabled"]:
            run_logger = JSONLogger(config["output_directory"], config["log_file_prefix"])

        run(args, config, run_logger)
    except ArgumentError as e:
        console.print(escape(f"Usage: {parser.prog} <source.tura> [<input.tape>]"))
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1
    except TuraError as e:
        if run_logger is not None:
            try:
                run_logger.log_error(e)
            except OSError as log_e:
                console.print(f"[red]ERROR: could not write run log: {escape(str(log_e))}[/red]")
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1
    except OSError as e:
        # Log directory or log file could not be written
        console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
