import pandas as pd

from msprefixspan.Errors import UnknownItemError, InvalidSupportError
from msprefixspan.ItemSet import ordered


# ############################# Class SupportTable #############################
class SupportTable:
    """The minimum support (MIS) of every item and the support difference
    constraint (SDC) shared by all of them. Read only once built.

    :param
    @minsup - a mapping from item to its minimum support, a value in (0, 1]
    @sdc - the largest difference allowed between the supports of two items
        grown into the same pattern
    """

    def __init__(self, minsup, sdc=1.0):
        self._minsup = dict(minsup)
        for item, value in self._minsup.items():
            if not 0.0 < value <= 1.0:
                raise InvalidSupportError("minimum support of " + repr(item) + " must be in (0, 1], got " +
                                          str(value))
        if not sdc >= 0:
            raise InvalidSupportError("sdc must be a non-negative number, got " + str(sdc))
        self._sdc = float(sdc)

    def get(self, item):
        try:
            return self._minsup[item]
        except KeyError:
            raise UnknownItemError(item) from None

    @property
    def sdc(self):
        return self._sdc

    def items(self):
        return self._minsup.items()

    def __contains__(self, item):
        return item in self._minsup

    def __len__(self):
        return len(self._minsup)

    def __iter__(self):
        return iter(self._minsup)

    def to_frame(self):
        keys = ordered(self._minsup)
        return pd.DataFrame({'item': keys, 'minsup': [self._minsup[k] for k in keys]})

    @classmethod
    def from_frame(cls, frame, sdc=1.0):
        return cls(zip(frame['item'], frame['minsup'].astype(float)), sdc)

    def __repr__(self):
        return "SupportTable(" + repr(self._minsup) + ", sdc=" + str(self._sdc) + ")"
