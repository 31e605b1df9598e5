"""
Command-line interface for tiny-qc.

Usage:
    tiny-qc sample --width 1 --init 0 --gate h --shots 1000
    tiny-qc sample --width 2 --init 2 --gate cnot
    tiny-qc sample --width 1 --init 1 --gate phase_shift:0.785 --gate h
    tiny-qc deutsch --function negation
    tiny-qc info
"""
import argparse
import logging
import sys

from tiny_qc.config import DEFAULT_SEED
from tiny_qc.exceptions import QuantumError

logger = logging.getLogger(__name__)

FUNCTIONS = {
    "zero": lambda x: 0,
    "one": lambda x: 1,
    "identity": lambda x: x,
    "negation": lambda x: 1 - x,
}


def parse_gate_spec(spec):
    """Split ``name[:p1,p2,...]`` into a name and a tuple of float parameters."""
    name, _, raw = spec.partition(':')
    params = tuple(float(p) for p in raw.split(',')) if raw else ()
    return name, params


def cmd_sample(args):
    """Run a gate sequence repeatedly and print the outcome histogram."""
    from ..computer import QuantumComputer
    from ..gates import get_gate

    gates = [get_gate(name, args.width, params)
             for name, params in map(parse_gate_spec, args.gate)]
    qc = QuantumComputer(args.width, rng=args.seed)
    counts = qc.run(args.init, gates, shots=args.shots)

    names = ' '.join(args.gate) or '(no gates)'
    print(f"{names} on |{args.init}⟩, {args.shots} shots:")
    for state, count in sorted(counts.items()):
        pct = 100 * count / args.shots
        bar = '█' * int(pct / 2)
        print(f"  |{state}⟩: {count:4d} ({pct:5.1f}%) {bar}")


def cmd_deutsch(args):
    """Classify a one-bit function as constant or balanced."""
    from ..algorithms import deutsch

    result = deutsch(FUNCTIONS[args.function], rng=args.seed)
    print(f"f = {args.function}: {result.value}")


def cmd_info(args):
    """Show tiny-qc information."""
    from .. import __version__
    from ..matrix import MAX_SIZE
    from ..gates import GATE_REGISTRY

    print(f"""
tiny-qc v{__version__}
━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

A small in-memory quantum computer simulator.

Limits:
  • Matrix capacity: {MAX_SIZE}x{MAX_SIZE}
  • Register width:  up to {MAX_SIZE.bit_length() - 1} qubits

Gates:
  {', '.join(sorted(GATE_REGISTRY))}
""")


def build_parser():
    parser = argparse.ArgumentParser(
        prog='tiny-qc',
        description='A small quantum computer simulator'
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    subparsers = parser.add_subparsers(dest='command', help='Commands')

    # Sample command
    sample_parser = subparsers.add_parser('sample', help='Sample a gate sequence')
    sample_parser.add_argument('--width', type=int, default=1, help='Register width in qubits')
    sample_parser.add_argument('--init', type=int, default=0, help='Initial classical state')
    sample_parser.add_argument('--gate', action='append', default=[],
                               metavar='NAME[:P1,P2]', help='Gate to apply (repeatable)')
    sample_parser.add_argument('--shots', type=int, default=1000, help='Number of shots')
    sample_parser.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Random seed')
    sample_parser.set_defaults(func=cmd_sample)

    # Deutsch command
    deutsch_parser = subparsers.add_parser('deutsch', help="Run Deutsch's algorithm")
    deutsch_parser.add_argument('--function', choices=sorted(FUNCTIONS), default='identity',
                                help='One-bit function to classify')
    deutsch_parser.add_argument('--seed', type=int, default=DEFAULT_SEED, help='Random seed')
    deutsch_parser.set_defaults(func=cmd_deutsch)

    # Info command
    info_parser = subparsers.add_parser('info', help='Show tiny-qc info')
    info_parser.set_defaults(func=cmd_info)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    from ..logging_config import setup_logging

    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level='DEBUG' if args.verbose else None)

    if args.command is None:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except (QuantumError, KeyError, ValueError) as exc:
        logger.debug("Command %s failed", args.command, exc_info=True)
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
