from tura.errors import InvalidStep, UnexpectedEof
from tura.simulator.lexer import TokenStream
from tura.simulator.turing_machine import Rule, Step

STEP_TOKENS = {"L": Step.LEFT, "R": Step.RIGHT}


def parse_symbol(stream):
    symbol = stream.next_token()
    if symbol is None:
        raise UnexpectedEof(stream.position)
    return symbol


def parse_step(stream):
    name = parse_symbol(stream)
    if name not in STEP_TOKENS:
        raise InvalidStep(name, stream.position)
    return STEP_TOKENS[name]


def parse_rule(stream):
    """Parse one `STATE READ WRITE STEP NEXT` line into a Rule."""
    state = parse_symbol(stream)
    read = parse_symbol(stream)
    write = parse_symbol(stream)
    step = parse_step(stream)
    next_state = parse_symbol(stream)
    return Rule(state=state, read=read, write=write, next=next_state, step=step)


def parse_rules(stream):
    """Parse rules until the stream is exhausted; the first bad rule aborts the parse."""
    rules = []
    while stream.has_more():
        rules.append(parse_rule(stream))
    return rules


def parse_tape(stream):
    symbols = []
    while stream.has_more():
        symbols.append(parse_symbol(stream))
    return symbols


def parse_rules_source(source):
    return parse_rules(TokenStream.from_source(source))


def parse_tape_source(source):
    return parse_tape(TokenStream.from_source(source))
