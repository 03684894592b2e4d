# ############################# Class ItemSet #############################
def ordered(items):
    """Sort items by their natural order, falling back to their repr when
    the items cannot be compared with each other"""
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return sorted(items, key=repr)


class ItemSet(frozenset):
    """The items occurring at one position of a transaction"""

    def __new__(cls, items=()):
        return super().__new__(cls, items)

    # the lowest minimum support among the member items
    def minsup(self, support):
        return min(support.get(item) for item in self)

    def prune(self, keep):
        return ItemSet(item for item in self if keep(item))

    def add(self, item):
        return ItemSet(self | {item})

    def __repr__(self):
        return "{" + ", ".join(str(item) for item in ordered(self)) + "}"

    __str__ = __repr__
