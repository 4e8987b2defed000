import numpy as np
import pytest


@pytest.fixture
def canonical_basis():
    return {
        "right": np.array([1.0, 0.0, 0.0]),
        "up": np.array([0.0, 1.0, 0.0]),
        "forward": np.array([0.0, 0.0, 1.0]),
    }


@pytest.fixture(autouse=True)
def quiet_debug(monkeypatch):
    monkeypatch.delenv("CAMERA3D_DEBUG", raising=False)
