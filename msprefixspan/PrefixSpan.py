import logging
from collections import Counter
from concurrent.futures import ThreadPoolExecutor

import numpy as np

from msprefixspan.Errors import EmptyPoolError, NoFrequentItemError
from msprefixspan.FrequentSet import FrequentSet
from msprefixspan.ItemSet import ItemSet, ordered
from msprefixspan.Stopwatch import Stopwatch
from msprefixspan.Transaction import Transaction

logger = logging.getLogger(__name__)


class PrefixSpan:
    """Implementation of the Minimum Support PrefixSpan algorithm. Given a collection of
    transactions and an item support lookup table, it generates every frequent transaction
    together with its support count.

    Each item carries its own minimum support (MIS), and two items are only grown into the
    same pattern when their supports differ by at most the support difference constraint (SDC).

    This program is free software: you can redistribute it and/or modify it under the terms of the
    GNU General Public License as published by the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful, but WITHOUT ANY WARRANTY; without even the
    implied warranty of MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU General Public License
    for more details.

    You should have received a copy of the GNU General Public License along with this program.
    If not, see <http://www.gnu.org/licenses/>.

    :param
    @sequences - the collection of transactions to process, left untouched
    @support - the SupportTable holding the MIS of every item and the SDC
    @observer - a MiningObserver told about the start and the end of every phase,
        by default the durations are logged at debug level
    @workers - the number of threads growing the seed items, 1 grows them in turn
    """

    def __init__(self, sequences, support, observer=None, workers=1):
        if workers < 1:
            raise ValueError("workers must be at least 1, got " + str(workers))
        self.sequences = list(sequences)
        self.support = support
        self.observer = observer
        self.workers = workers

    def process(self):
        """Process the sequences to produce all the frequent sequences with the supplied support.

        :return: a list of FrequentSet, the frequent items first then the frequent extensions of
            each of them
        """
        stopwatch = Stopwatch(self.observer)
        mining_run = MiningRun(self.sequences, self.support, self.workers)

        with stopwatch.phase("processing"):
            with stopwatch.phase("initialization"):
                frequent = mining_run.initialize()
            with stopwatch.phase("growth"):
                frequents = mining_run.build_frequents(frequent)

        logger.info("found %d frequent sequences in %d sets",
                    sum(len(f) for f in frequents), len(frequents))
        return frequents


def item_supports(sequences):
    """Count every item once per transaction containing it.

    :return: the dictionaries of the item counts and of the item supports (count / N)
    """
    size_n = len(sequences)
    if size_n == 0:
        raise EmptyPoolError()

    # I with repeats
    all_items = [item for sequence in sequences for item in sequence.unique()]
    unique = ordered(set(all_items))
    index = {item: i for i, item in enumerate(unique)}

    counts = np.bincount(np.array([index[item] for item in all_items], dtype=np.intp), minlength=len(unique))
    actual = counts / size_n

    return dict(zip(unique, counts.tolist())), dict(zip(unique, actual.tolist()))


def min_count(threshold, size_n):
    # rounding first keeps 0.3 * 10 at 3 instead of 3.0000000000000004
    return int(np.ceil(round(threshold * size_n, 9)))


class MiningRun:
    """The state of one call to PrefixSpan.process"""

    def __init__(self, sequences, support, workers=1):
        self.sequences = sequences
        self.support = support
        self.workers = workers
        # N, the number of transactions
        self.size_n = len(sequences)
        self.counts = dict()
        self.actual = dict()
        # position of every item once sorted by minimum support
        self.rank = dict()

    def initialize(self):
        """Generate the frequent items of the transactions. This covers the following
        portions of the algorithm:
        * M: sort(I, MS)
        * L: init-pass(M, S)
        * F1: the items of L reaching their own MIS
        """
        self.counts, self.actual = item_supports(self.sequences)
        support = self.support

        # M, ties broken by the natural order of the items
        natural = list(self.counts)
        sorted_items = sorted(natural, key=lambda item: support.get(item))
        self.rank = {item: r for r, item in enumerate(sorted_items)}

        # the first item reaching its own support
        start = next((i for i, item in enumerate(sorted_items) if self.actual[item] >= support.get(item)), None)
        if start is None:
            raise NoFrequentItemError("no item reaches its own minimum support")
        minsup = support.get(sorted_items[start])

        # L
        level1 = [item for item in sorted_items[start:] if self.actual[item] >= minsup]
        # F1
        filtered = [item for item in level1 if self.actual[item] >= support.get(item)]

        logger.debug("generated initial candidates: %s", filtered)
        return FrequentSet([Transaction([ItemSet([item])], self.counts[item], self.size_n) for item in filtered],
                           name="level 1")

    def build_frequents(self, candidate):
        """Grow every frequent item of the candidate set.

        :return: the candidate set followed by one set per item having frequent extensions
        """
        frequents = [candidate]

        if self.workers > 1 and len(candidate) > 1:
            with ThreadPoolExecutor(max_workers=self.workers) as executor:
                grown = list(executor.map(self.grow, candidate.transactions))
        else:
            grown = [self.grow(transaction) for transaction in candidate.transactions]

        frequents.extend(frequent for frequent in grown if len(frequent) > 0)
        return frequents

    def grow(self, transaction):
        ik = next(iter(transaction.sets[0]))
        sk = self.project(transaction, self.sequences, ik)
        frequent = self.restricted_prefix_span(transaction, sk, ik)

        logger.debug("item %s: %d projected transactions, %d frequent extensions", ik, len(sk), len(frequent))
        return FrequentSet(frequent, name="extensions of " + str(ik))

    def evaluate_sdc(self, left, right):
        return abs(self.actual[left] - self.actual[right]) <= self.support.sdc

    def project(self, prefix, pool, ik):
        """Build the projection of the pool on prefix, keeping in each transaction only the items
        within the support difference constraint of the seed item ik.

        :return: the pruned transactions of the pool containing prefix
        """
        possible = []
        for sequence in pool:
            if sequence.contains(prefix):
                pruned = sequence.prune(lambda item: self.evaluate_sdc(ik, item))
                # eliminate prefix only patterns
                if pruned.size() > 1 or (pruned.size() == 1 and len(pruned.sets[0]) > 1):
                    possible.append(pruned)
        return possible

    def count_extensions(self, prefix, projected):
        """Count, once per projected transaction, the items that can grow prefix either inside its
        last itemset or as a new itemset. Inside the last itemset only the items sorted after its
        current items are considered, so that every pattern is generated once.

        :return: a Counter keyed on (item, new_itemset)
        """
        counts = Counter()
        k = prefix.size()
        floor = max(self.rank[item] for item in prefix.sets[-1])

        for sequence in projected:
            candidates = set((item, False) for item in sequence.sets[k - 1] if self.rank[item] > floor)
            if sequence.size() > k:
                candidates.update((item, True) for item in sequence.sets[k])
            counts.update(candidates)
        return counts

    def remove_infrequent(self, counts, minimum):
        frequent = [(item, new_itemset, count) for (item, new_itemset), count in counts.items() if count >= minimum]
        return sorted(frequent, key=lambda extension: (extension[1], self.rank[extension[0]]))

    def restricted_prefix_span(self, prefix, projected, ik):
        """Recursively grow prefix with the items frequent in its projection.

        :return: every frequent extension of prefix, depth first
        """
        frequent = []
        minimum = min_count(prefix.minsup(self.support), self.size_n)

        for item, new_itemset, count in self.remove_infrequent(self.count_extensions(prefix, projected), minimum):
            extended = prefix.extend(item, new_itemset, count, self.size_n)
            frequent.append(extended)
            frequent.extend(self.restricted_prefix_span(extended, self.project(extended, projected, ik), ik))

        return frequent
