import numpy as np
import pytest


@pytest.fixture
def rng():
    return np.random.default_rng(20240501)


class StubGenerator:
    """Generator replaying fixed uniform and normal draws."""

    def __init__(self, uniforms, normals=()):
        self.uniforms = np.asarray(uniforms, dtype=np.float64)
        self.normals = np.asarray(normals, dtype=np.float64)

    def random(self, size):
        out, self.uniforms = self.uniforms[:size], self.uniforms[size:]
        return out

    def standard_normal(self, size):
        out, self.normals = self.normals[:size], self.normals[size:]
        return out


@pytest.fixture
def stub_rng():
    return StubGenerator
