"""
Dump FRI layer vectors as JSON.

Folds a polynomial once per beta and prints every layer (polynomial
coefficients, domain, evaluations) so the values can be pinned in tests or
compared against another implementation.

Usage:
    python -m fri_fold \
        --modulus 293 \
        --coeffs 3,1,2,7,3,5 \
        --domain 5,7,13,20,1,1,1,1 \
        --betas 4,3,2 \
        [--output layers.json]

    python -m fri_fold --modulus 18446744069414584321 \
        --coeffs 1,2,3,4,5,6,7,8 --domain-size 16 --offset 7 --betas 11,12,13
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

from fri_fold.errors import FriFoldError
from fri_fold.primitives.domain import evaluation_domain
from fri_fold.primitives.field import DEMO_PRIME, lift, to_ints
from fri_fold.primitives.polynomial import Polynomial
from fri_fold.protocol.folder import FoldConfig, FriFolder
from fri_fold.protocol.fri import FriLayer

logger = logging.getLogger("fri_fold")


def parse_int_list(text: str) -> List[int]:
    """Parse a comma-separated list of ints ("" -> [])."""
    text = text.strip()
    if not text:
        return []
    try:
        return [int(v, 0) for v in text.split(',')]
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {text!r}") from e


def layer_to_json(layer: FriLayer) -> dict:
    return {
        'polynomial': to_ints(layer.polynomial.coefficients),
        'domain': to_ints(layer.domain),
        'evaluations': to_ints(layer.evaluations),
    }


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='python -m fri_fold',
        description='Fold a polynomial through FRI layers and dump them as JSON'
    )
    parser.add_argument(
        '--modulus',
        type=int,
        default=DEMO_PRIME,
        help=f'Prime field modulus (default: {DEMO_PRIME})'
    )
    parser.add_argument(
        '--coeffs',
        type=parse_int_list,
        required=True,
        help='Polynomial coefficients, constant term first'
    )
    domain = parser.add_mutually_exclusive_group(required=True)
    domain.add_argument(
        '--domain',
        type=parse_int_list,
        help='Explicit evaluation domain'
    )
    domain.add_argument(
        '--domain-size',
        type=int,
        help='Build a coset of the subgroup of this size (power of 2)'
    )
    parser.add_argument(
        '--offset',
        type=int,
        default=1,
        help='Coset offset for --domain-size (default: 1)'
    )
    parser.add_argument(
        '--betas',
        type=parse_int_list,
        required=True,
        help='Folding challenges, one per layer'
    )
    parser.add_argument(
        '--max-degree',
        type=int,
        default=None,
        help='Stop once the folded degree is at most this value'
    )
    parser.add_argument(
        '--check-domains',
        action='store_true',
        help='Reject domains that are not closed under negation'
    )
    parser.add_argument(
        '--output',
        type=Path,
        default=None,
        help='Output path for JSON layers (default: stdout)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Log each layer'
    )
    return parser


def run(args: argparse.Namespace) -> dict:
    config = FoldConfig(
        modulus=args.modulus,
        max_degree=args.max_degree,
        check_domains=args.check_domains,
    )
    folder = FriFolder(config)
    field = folder.field

    polynomial = Polynomial(args.coeffs, field)
    if args.domain is not None:
        domain = lift(field, args.domain)
    else:
        domain = evaluation_domain(field, args.domain_size, args.offset)

    layers = folder.fold(polynomial, domain, args.betas)
    return {
        'modulus': field.order,
        'layers': [layer_to_json(layer) for layer in layers],
    }


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )

    try:
        result = run(args)
    except (FriFoldError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    text = json.dumps(result, indent=2)
    if args.output is None:
        print(text)
    else:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        with open(args.output, 'w') as f:
            f.write(text + '\n')
        logger.info("Written %d layers to %s", len(result['layers']), args.output)
    return 0


if __name__ == '__main__':
    sys.exit(main())
