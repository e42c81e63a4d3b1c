import pytest

from underbar.timers import VirtualScheduler


@pytest.fixture
def clock():
    return VirtualScheduler()
