import logging

from msprefixspan.Errors import UnsupportedLocationError

logger = logging.getLogger(__name__)


# ############################# Resource loaders #############################
class AbstractLoader:
    """Turns a location into the lines of the resource found there"""

    def supports(self, location):
        raise NotImplementedError

    def load(self, location):
        raise NotImplementedError


class FileLoader(AbstractLoader):
    """Loads file:// locations and plain paths"""

    prefix = "file://"

    def supports(self, location):
        return location.startswith(self.prefix) or "://" not in location

    def load(self, location):
        if location.startswith(self.prefix):
            location = location[len(self.prefix):]
        with open(location, 'r', encoding='utf-8') as f:
            for line in f:
                yield line.rstrip('\r\n')


class LiteralLoader(AbstractLoader):
    """Loads the text embedded in a literal: location, lines separated by newlines or ';'"""

    prefix = "literal:"

    def supports(self, location):
        return location.startswith(self.prefix)

    def load(self, location):
        text = location[len(self.prefix):]
        for line in text.splitlines():
            for part in line.split(';'):
                yield part


# the first loader supporting a location wins
loaders = [LiteralLoader(), FileLoader()]


def register_loader(loader):
    loaders.insert(0, loader)


def load_lines(location, registered=None):
    for loader in (loaders if registered is None else registered):
        if loader.supports(location):
            logger.debug("loading %s with %s", location, type(loader).__name__)
            return loader.load(location)
    raise UnsupportedLocationError("no loader supports " + repr(location))
