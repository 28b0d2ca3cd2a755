"""Global pytest fixtures for tidyseq."""

import pytest

from tidyseq.config import CONTRACTS_ENV_VAR
from tidyseq.contracts import set_mode


@pytest.fixture(autouse=True)
def default_contract_mode(monkeypatch: pytest.MonkeyPatch):
    """Start every test with contracts enforced and no mode override."""
    monkeypatch.delenv(CONTRACTS_ENV_VAR, raising=False)
    set_mode(None)
    yield
    set_mode(None)
