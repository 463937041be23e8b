"""Pytest configuration and shared fixtures for burmese_cluster tests."""

import sys
from pathlib import Path

import pytest

# Add package to path
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from burmese_cluster import BurmeseNormalizer, GraphemeCluster


@pytest.fixture
def cluster() -> GraphemeCluster:
    """Lenient cluster: logs and ignores unexpected characters."""
    return GraphemeCluster()


@pytest.fixture
def strict_cluster() -> GraphemeCluster:
    """Cluster that raises on unexpected characters."""
    return GraphemeCluster(throw_on_error=True)


@pytest.fixture
def compose():
    """Feed a string into a fresh (or given) cluster one code point at a time."""
    def _compose(text, cluster=None):
        if cluster is None:
            cluster = GraphemeCluster()
        for char in text:
            cluster.add(char)
        return cluster
    return _compose


@pytest.fixture
def normalizer() -> BurmeseNormalizer:
    return BurmeseNormalizer()
