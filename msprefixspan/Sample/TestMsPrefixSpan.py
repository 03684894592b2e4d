import logging
import os

from msprefixspan import PrefixSpan, read_sequences, read_supports, frequents_to_frame

DATA = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'Data')


def main():
    logging.basicConfig(level=logging.DEBUG)

    sequences = read_sequences(os.path.join(DATA, 'database.txt'), item_type=int)
    support = read_supports(os.path.join(DATA, 'supports.txt'), item_type=int)

    frequents = PrefixSpan(sequences, support).process()

    for frequent in frequents:
        print(frequent.name + ": \n")
        for transaction in frequent:
            print(str(transaction) + ", count: " + str(transaction.count) +
                  ", support: " + str(transaction.support))

    print(frequents_to_frame(frequents))


if __name__ == "__main__":
    main()
