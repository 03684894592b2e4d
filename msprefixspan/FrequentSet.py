import pandas as pd


# ############################# Class FrequentSet #############################
class FrequentSet:
    """The transactions found frequent by one step of the mining run"""

    columns = ['pattern', 'count', 'support', 'length', 'size']

    def __init__(self, transactions=(), name=""):
        self.name = name
        self.transactions = list(transactions)

    def to_frame(self):
        rows = [[repr(t), t.count, t.support, t.length(), t.size()] for t in self.transactions]
        return pd.DataFrame(rows, columns=FrequentSet.columns)

    def __len__(self):
        return len(self.transactions)

    def __iter__(self):
        return iter(self.transactions)

    def __repr__(self):
        return "FrequentSet(" + repr(self.name) + ", " + repr(self.transactions) + ")"


def frequents_to_frame(frequents):
    frames = []
    for frequent in frequents:
        frame = frequent.to_frame()
        frame.insert(0, 'set', frequent.name)
        frames.append(frame)
    if not frames:
        return pd.DataFrame(columns=['set'] + FrequentSet.columns)
    return pd.concat(frames, ignore_index=True)
