import argparse
import logging
import sys

import pandas as pd

from msprefixspan.Errors import MiningError
from msprefixspan.FrequentSet import frequents_to_frame
from msprefixspan.Parser import read_sequences, read_supports
from msprefixspan.PrefixSpan import PrefixSpan

logger = logging.getLogger(__name__)


def build_parser():
    parser = argparse.ArgumentParser(prog='msprefixspan',
                                     description='Mine frequent sequences with per item minimum supports')
    parser.add_argument('-i', '--input', required=True, help='location of the transactions')
    parser.add_argument('-s', '--support', required=True, help='location of the MIS and SDC values')
    parser.add_argument('-o', '--output', help='csv file receiving the frequent sequences')
    parser.add_argument('-w', '--workers', type=int, default=1, help='threads growing the frequent items')
    parser.add_argument('-n', '--numeric', action='store_true', help='read the items as integers')
    parser.add_argument('-v', '--verbose', action='store_true', help='log every phase')
    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO,
                        format='%(asctime)s %(levelname)s %(name)s: %(message)s')
    item_type = int if args.numeric else str

    try:
        sequences = read_sequences(args.input, item_type)
        support = read_supports(args.support, item_type)
        frequents = PrefixSpan(sequences, support, workers=args.workers).process()
    except (MiningError, OSError, ValueError) as e:
        logger.error("mining failed: %s", e)
        return 1

    frame = frequents_to_frame(frequents)
    with pd.option_context('display.max_rows', None, 'display.width', 200):
        print(frame.to_string(index=False))

    if args.output:
        frame.to_csv(args.output, index=False)
        logger.info("saved %d sequences to %s", len(frame), args.output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
