"""Shared pytest fixtures for solgate tests."""

import pytest
from fastapi.testclient import TestClient
from solders.keypair import Keypair

from solgate.api.app import create_app
from solgate.config import ServerConfig

SYSTEM_PROGRAM = "11111111111111111111111111111111"
TOKEN_PROGRAM = "TokenkegQfeZyiNwAJbNbGKPFXCWuBvf9Ss623VQ5DA"
RENT_SYSVAR = "SysvarRent111111111111111111111111111111111"

# Not base58 (0, O, I, l are outside the alphabet), base58 but 2 bytes long,
# surrounding whitespace, and longer than any 32-byte encoding
BAD_ADDRESSES = [
    "0OIl-not-an-address",
    "abc",
    SYSTEM_PROGRAM + "\n",
    SYSTEM_PROGRAM + "  ",
    " " + SYSTEM_PROGRAM,
    "z" * 45,
]


def make_keypair(n: int) -> Keypair:
    """Deterministic keypair from a repeated seed byte."""
    return Keypair.from_seed(bytes([n]) * 32)


@pytest.fixture
def client() -> TestClient:
    """Test client against a freshly built app."""
    return TestClient(create_app(ServerConfig()))


@pytest.fixture
def mint() -> str:
    return str(make_keypair(1).pubkey())


@pytest.fixture
def authority() -> str:
    return str(make_keypair(2).pubkey())


@pytest.fixture
def owner() -> str:
    return str(make_keypair(3).pubkey())


@pytest.fixture
def destination() -> str:
    return str(make_keypair(4).pubkey())
