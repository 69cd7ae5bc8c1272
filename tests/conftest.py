#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import io

# Third-party ----------------------------------------------------------------------------------------------------------
import pytest


# Classes --------------------------------------------------------------------------------------------------------------

class RecordingSink:
    """Text sink remembering every write call separately."""

    def __init__(self):
        self.writes: list[str] = []

    def write(self, s: str) -> int:
        self.writes.append(s)
        return len(s)

    def getvalue(self) -> str:
        return "".join(self.writes)


class FailingSink(RecordingSink):
    """Text sink accepting fail_after writes, then raising OSError."""

    def __init__(self, fail_after: int = 0):
        super().__init__()
        self.fail_after = fail_after

    def write(self, s: str) -> int:
        if len(self.writes) >= self.fail_after:
            raise OSError("sink is full")
        return super().write(s)


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def sink() -> io.StringIO:
    """Fresh in-memory text sink."""
    return io.StringIO()


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Sink that keeps individual write calls for ordering and laziness checks."""
    return RecordingSink()


@pytest.fixture
def failing_sink():
    """Factory for sinks that raise OSError after the given number of writes."""

    def _create_sink(fail_after: int = 0) -> FailingSink:
        return FailingSink(fail_after=fail_after)

    return _create_sink
