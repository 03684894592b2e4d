# ############################# Exceptions raised while mining #############################
class MiningError(Exception):
    """Base class of every error raised by a mining run"""


class UnknownItemError(MiningError, KeyError):
    def __init__(self, item):
        super().__init__(item)
        self.item = item

    def __str__(self):
        return "no minimum support configured for item " + repr(self.item)


class NoFrequentItemError(MiningError):
    pass


class EmptyPoolError(NoFrequentItemError):
    def __str__(self):
        return "the sequence pool is empty"


class InvalidSupportError(MiningError, ValueError):
    pass


class ParseError(MiningError, ValueError):
    def __init__(self, message, line_no=None, line=None):
        super().__init__(message)
        self.line_no = line_no
        self.line = line

    def __str__(self):
        message = super().__str__()
        if self.line_no is not None:
            message = "line " + str(self.line_no) + ": " + message
        if self.line is not None:
            message += " (" + repr(self.line) + ")"
        return message


class UnsupportedLocationError(MiningError):
    pass
