from msprefixspan.Errors import (MiningError, UnknownItemError, NoFrequentItemError, EmptyPoolError,
                                 InvalidSupportError, ParseError, UnsupportedLocationError)
from msprefixspan.ItemSet import ItemSet
from msprefixspan.Transaction import Transaction
from msprefixspan.SupportTable import SupportTable
from msprefixspan.FrequentSet import FrequentSet, frequents_to_frame
from msprefixspan.Stopwatch import MiningObserver, LoggingObserver
from msprefixspan.PrefixSpan import PrefixSpan, item_supports
from msprefixspan.Loader import AbstractLoader, FileLoader, LiteralLoader, load_lines, register_loader
from msprefixspan.Parser import parse_transactions, parse_supports, read_sequences, read_supports
