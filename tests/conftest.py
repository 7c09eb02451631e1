import random

import pytest

from passforge.entities import PasswordArgs


@pytest.fixture
def default_args():
    """Build inputs equivalent to running with no flags"""
    return PasswordArgs(length=16, password_count=1)


@pytest.fixture
def seeded_rng():
    return random.Random(12345)


@pytest.fixture
def mixed_alphabet():
    """Three characters from each category"""
    return b"abcABC012!@#"
