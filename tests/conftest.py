import pytest

from quickreflect import Env, Log


@pytest.fixture
def env():
    """Swap in an empty Env; tests call env_reset(vars) to configure it."""
    saved = Env._instance
    Env.reset({})
    yield Env.reset
    Env._instance = saved


@pytest.fixture
def log_recs():
    """Collect every LogRec emitted while the test runs."""
    recs = []
    Log.add_handler(recs.append)
    yield recs
    Log.remove_handler(recs.append)
