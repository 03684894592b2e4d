import re

from msprefixspan.Errors import ParseError
from msprefixspan.Loader import load_lines
from msprefixspan.SupportTable import SupportTable
from msprefixspan.Transaction import Transaction

# <{10, 40, 50}{40, 90}>
TRANSACTION = re.compile(r'^<(?:\s*\{[^{}]*\})+\s*>$')
ITEMSET = re.compile(r'\{([^{}]*)\}')
# MIS(10) = 0.43
MIS = re.compile(r'^MIS\s*\(\s*(.+?)\s*\)\s*=\s*(\S+)$')
# SDC = 0.1
SDC = re.compile(r'^SDC\s*=\s*(\S+)$')


def skip(line):
    return not line or line.startswith('#')


def convert(to_type, text, line_no, line):
    try:
        return to_type(text)
    except ValueError as e:
        raise ParseError(str(e), line_no, line) from e


def parse_transaction(line, item_type=str, line_no=None):
    line = line.strip()
    if not TRANSACTION.match(line):
        raise ParseError("malformed transaction", line_no, line)

    sets = []
    for body in ITEMSET.findall(line):
        tokens = [token.strip() for token in body.split(',')]
        if not any(tokens):
            raise ParseError("empty itemset", line_no, line)
        if not all(tokens):
            raise ParseError("empty item", line_no, line)
        sets.append([convert(item_type, token, line_no, line) for token in tokens])
    return Transaction(sets)


def parse_transactions(lines, item_type=str):
    transactions = []
    for line_no, line in enumerate(lines, 1):
        if skip(line.strip()):
            continue
        transactions.append(parse_transaction(line, item_type, line_no))
    return transactions


def parse_supports(lines, item_type=str):
    """Build a SupportTable from 'MIS(item) = value' lines and one 'SDC = value' line.
    Without an SDC line every pair of items may be grown together."""
    minsup = dict()
    sdc = 1.0

    for line_no, line in enumerate(lines, 1):
        line = line.strip()
        if skip(line):
            continue

        mis_match = MIS.match(line)
        sdc_match = SDC.match(line)
        if mis_match:
            item = convert(item_type, mis_match.group(1), line_no, line)
            minsup[item] = convert(float, mis_match.group(2), line_no, line)
        elif sdc_match:
            sdc = convert(float, sdc_match.group(1), line_no, line)
        else:
            raise ParseError("expected 'MIS(item) = value' or 'SDC = value'", line_no, line)

    return SupportTable(minsup, sdc)


def read_sequences(location, item_type=str):
    return parse_transactions(load_lines(location), item_type)


def read_supports(location, item_type=str):
    return parse_supports(load_lines(location), item_type)
