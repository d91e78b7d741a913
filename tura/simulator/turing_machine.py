from enum import Enum
from typing import NamedTuple

from tura.errors import EmptyTapeError, OutOfBoundsError

INITIAL_STATE = "Inc"


class Step(Enum):
    LEFT = "L"
    RIGHT = "R"


class Rule(NamedTuple):
    state: str
    read: str
    write: str
    next: str
    step: Step

    def __str__(self):
        return f"{self.state} {self.read} {self.write} {self.step.value} {self.next}"


class TapeConfig:
    """Initial tape plus growth policy.

    `default` is None for a fixed tape, otherwise the symbol appended when the
    head steps right off the end.
    """

    def __init__(self, initial_tape, default=None):
        self.initial_tape = tuple(initial_tape)
        self.default = default

    @classmethod
    def fixed(cls, tape):
        tape = tuple(tape)
        if not tape:
            raise EmptyTapeError()
        return cls(tape)

    @classmethod
    def auto_extend(cls, tape):
        tape = tuple(tape)
        if not tape:
            raise EmptyTapeError()
        return cls(tape, default=tape[-1])

    @property
    def extends(self):
        return self.default is not None


class Machine:
    def __init__(self, tape_config):
        self.tape_config = tape_config
        self.tape_default = tape_config.default
        self.state = INITIAL_STATE
        self.tape = list(tape_config.initial_tape)
        self.head = 0
        self.halt = False

    def step(self, rules):
        """Apply the first rule matching (state, symbol under head).

        Returns the rule that fired, or None when nothing matched; in that
        case the halt flag is left as it was.
        """
        for rule in rules:
            if rule.state != self.state:
                continue
            if self.head >= len(self.tape):
                # A fixed tape lets the head sit one past the last cell; reading there is fatal
                raise OutOfBoundsError(self.head, Step.RIGHT)
            if rule.read == self.tape[self.head]:
                self.tape[self.head] = rule.write
                if rule.step is Step.LEFT:
                    if self.head == 0:
                        raise OutOfBoundsError(self.head, rule.step)
                    self.head -= 1
                else:
                    self.head += 1
                    if self.tape_default is not None and self.head >= len(self.tape):
                        self.tape.append(self.tape_default)
                self.state = rule.next
                self.halt = False
                return rule
        return None

    def run(self, rules, emit=print, on_step=None):
        """Print and step until no rule fires. Returns the number of steps taken."""
        steps = 0
        while not self.halt:
            emit(self.render())
            self.halt = True
            rule = self.step(rules)
            if rule is not None:
                steps += 1
                if on_step is not None:
                    on_step(steps, rule, self)
        return steps

    def head_column(self):
        column = len(self.state) + 2
        for symbol in self.tape[:self.head]:
            column += len(symbol) + 1
        return column

    def render(self):
        tape_str = "".join(f"{symbol} " for symbol in self.tape)
        return f"{self.state}: {tape_str}\n{' ' * self.head_column()}^"

    def serialize(self):
        return {
            "state": self.state,
            "tape": list(self.tape),
            "head": self.head,
            "halt": self.halt,
        }
