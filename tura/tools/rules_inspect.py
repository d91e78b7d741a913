# tura/tools/rules_inspect.py

import argparse
import sys

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from tura.app import read_source
from tura.errors import TuraError
from tura.simulator.parser import parse_rules_source
from tura.simulator.turing_machine import INITIAL_STATE

console = Console()


def find_shadowed(rules):
    """Map the index of each unreachable rule to the index of the earlier rule that wins its (state, read) pair."""
    first_seen = {}
    shadowed = {}
    for idx, rule in enumerate(rules):
        key = (rule.state, rule.read)
        if key in first_seen:
            shadowed[idx] = first_seen[key]
        else:
            first_seen[key] = idx
    return shadowed


def halting_states(rules):
    """States that are entered by some rule but have no rule of their own, in first-seen order."""
    with_rules = {rule.state for rule in rules}
    states = []
    for rule in rules:
        if rule.next not in with_rules and rule.next not in states:
            states.append(rule.next)
    return states


def build_rules_table(rules):
    shadowed = find_shadowed(rules)
    table = Table(title="Rules", show_header=True, header_style="bold magenta")
    table.add_column("#", justify="right")
    table.add_column("State")
    table.add_column("Read", justify="center")
    table.add_column("Write", justify="center")
    table.add_column("Step", justify="center")
    table.add_column("Next")
    table.add_column("Note")

    for idx, rule in enumerate(rules):
        note = ""
        style = None
        if idx in shadowed:
            note = f"shadowed by #{shadowed[idx]}"
            style = "dim"
        table.add_row(
            str(idx),
            escape(rule.state),
            escape(rule.read),
            escape(rule.write),
            rule.step.value,
            escape(rule.next),
            note,
            style=style,
        )
    return table


def inspect_rules(rules):
    console.print(build_rules_table(rules))

    if not any(rule.state == INITIAL_STATE for rule in rules):
        console.print(f"[yellow]No rule starts in the entry state {INITIAL_STATE}; the machine halts immediately.[/yellow]")

    stops = halting_states(rules)
    if stops:
        console.print("Halting states: " + ", ".join(escape(state) for state in stops))

    shadowed = find_shadowed(rules)
    if shadowed:
        console.print(f"[yellow]{len(shadowed)} rule(s) can never fire.[/yellow]")
    else:
        console.print("[green]Every rule is reachable by its (state, read) pair.[/green]")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="tura-inspect", description="Inspect the rule table of a .tura file")
    parser.add_argument("source", help="Rule file to inspect")
    args = parser.parse_args(argv)

    try:
        rules = parse_rules_source(read_source(args.source))
    except TuraError as e:
        Console(stderr=True).print(f"[red]ERROR: {escape(str(e))}[/red]")
        return 1

    inspect_rules(rules)
    return 0


if __name__ == "__main__":
    sys.exit(main())
