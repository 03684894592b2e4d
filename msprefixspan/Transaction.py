from msprefixspan.ItemSet import ItemSet


# ############################# Class Transaction #############################
class Transaction:
    """An ordered sequence of itemsets

    :param
    @sets - the itemsets composing this transaction, in order
    @count - how many times this exact shape was observed
    @size_n - the number of transactions in the mining pool, when known the
        support is computed as count / size_n
    """

    def __init__(self, sets, count=1, size_n=None):
        self._sets = tuple(s if isinstance(s, ItemSet) else ItemSet(s) for s in sets)
        if any(len(s) == 0 for s in self._sets):
            raise ValueError("a transaction cannot hold an empty itemset")
        if count < 0:
            raise ValueError("count must not be negative")
        self._count = count
        self._support = None if size_n is None else count / size_n

    @property
    def sets(self):
        return self._sets

    @property
    def count(self):
        return self._count

    @property
    def support(self):
        return self._support

    # the number of itemsets in this transaction
    def size(self):
        return len(self._sets)

    # the total number of items in all the itemsets
    def length(self):
        return sum(len(s) for s in self._sets)

    def unique(self):
        return set().union(*self._sets)

    def all_items(self):
        return [item for s in self._sets for item in s]

    def contains(self, other):
        """True iff every itemset of other is a subset of the itemset found at
        the same position of this transaction"""
        if other.size() > self.size():
            return False
        return all(needle <= source for needle, source in zip(other.sets, self._sets))

    def minsup(self, support):
        return min(s.minsup(support) for s in self._sets)

    def prune(self, keep):
        """Keep only the items accepted by keep, dropping the itemsets left empty"""
        sets = [s.prune(keep) for s in self._sets]
        return Transaction([s for s in sets if s], self._count)

    def extend(self, item, new_itemset, count=1, size_n=None):
        if new_itemset:
            sets = self._sets + (ItemSet([item]),)
        else:
            sets = self._sets[:-1] + (self._sets[-1].add(item),)
        return Transaction(sets, count, size_n)

    def __len__(self):
        return len(self._sets)

    def __iter__(self):
        return iter(self._sets)

    def __getitem__(self, index):
        return self._sets[index]

    def __eq__(self, other):
        if not isinstance(other, Transaction):
            return NotImplemented
        return self._sets == other.sets

    def __hash__(self):
        return hash(self._sets)

    def __repr__(self):
        return "<" + "".join(repr(s) for s in self._sets) + ">"

    __str__ = __repr__
