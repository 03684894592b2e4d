import logging
import time
from contextlib import contextmanager

logger = logging.getLogger(__name__)


# ############################# Timing observers #############################
class MiningObserver:
    """Receives the start and the end of every phase of a mining run"""

    def start(self, phase):
        pass

    def stop(self, phase, duration):
        pass


class LoggingObserver(MiningObserver):

    def stop(self, phase, duration):
        logger.debug("%s took %.4f seconds", phase, duration)


class Stopwatch:

    def __init__(self, observer=None):
        self.observer = observer if observer is not None else LoggingObserver()

    @contextmanager
    def phase(self, name):
        self.observer.start(name)
        started = time.perf_counter()
        try:
            yield
        finally:
            self.observer.stop(name, time.perf_counter() - started)
