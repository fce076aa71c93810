import pytest

from wmedian import Data, Record


class Sample(Data):
    """A third-party record type implementing only the capability."""

    def __init__(self, value, weight):
        self.v = value
        self.w = weight

    def get_value(self):
        return self.v

    def get_weight(self):
        return self.w


RECORD_KINDS = {
    "record": Record,
    "tuple": lambda v, w: (v, w),
    "list": lambda v, w: [v, w],
    "data": Sample,
}


@pytest.fixture(params=sorted(RECORD_KINDS))
def make_records(request):
    """
    Return a function turning ``[(value, weight), ...]`` into a list of
    records of one of the supported shapes.
    """
    factory = RECORD_KINDS[request.param]

    def _make_records(pairs):
        return [factory(v, w) for v, w in pairs]

    return _make_records


@pytest.fixture
def debug_log():
    """Turn on debug logging, which also enables the conservation check."""
    from wmedian.console import log

    log.enable(verbose=True)
    yield log
    log.disable()


def pytest_configure(config):
    config.addinivalue_line("markers", "numba: Tests that compile the numba kernel.")
