#!/usr/bin/env python3
"""Smoke test for the gateway.

Exercises every endpoint in-process through a TestClient and checks the
success envelope, so a broken SDK upgrade shows up before deployment.

Usage:
    python scripts/smoke_gateway.py

Exit codes:
    0: All checks passed
    1: Some checks failed
"""

from __future__ import annotations

import sys
from pathlib import Path

# Add src to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT / "src"))

from fastapi.testclient import TestClient  # noqa: E402

from solgate.api.app import create_app  # noqa: E402
from solgate.config import ServerConfig  # noqa: E402

SYSTEM_PROGRAM = "11111111111111111111111111111111"
MESSAGE = "smoke test"


def check_keypair(client: TestClient) -> dict | None:
    """Check key generation and the simulated failure."""
    response = client.post("/keypair")
    if response.status_code != 200:
        print(f"FAIL: /keypair returned {response.status_code}")
        return None
    print("OK: /keypair")

    failed = client.post("/keypair?fail=true")
    if failed.status_code != 400:
        print(f"FAIL: /keypair?fail=true returned {failed.status_code}")
        return None
    print("OK: /keypair?fail=true rejected")

    return response.json()["data"]


def check_tokens(client: TestClient, mint: str, authority: str) -> bool:
    """Check both token instruction builders."""
    ok = True
    create = client.post(
        "/token/create",
        json={"mintAuthority": authority, "mint": mint, "decimals": 6},
    )
    mint_to = client.post(
        "/token/mint",
        json={"mint": mint, "destination": authority, "authority": authority, "amount": 1},
    )
    for path, response in [("/token/create", create), ("/token/mint", mint_to)]:
        if response.status_code == 200:
            print(f"OK: {path}")
        else:
            print(f"FAIL: {path} - {response.json().get('error')}")
            ok = False
    return ok


def check_messages(client: TestClient, secret: str, pubkey: str) -> bool:
    """Check the sign / verify round trip."""
    signed = client.post("/message/sign", json={"message": MESSAGE, "secret": secret})
    if signed.status_code != 200:
        print(f"FAIL: /message/sign - {signed.json().get('error')}")
        return False
    print("OK: /message/sign")

    verified = client.post(
        "/message/verify",
        json={
            "message": MESSAGE,
            "signature": signed.json()["data"]["signature"],
            "pubkey": pubkey,
        },
    )
    if verified.status_code != 200 or not verified.json()["data"]["valid"]:
        print("FAIL: /message/verify did not accept a fresh signature")
        return False
    print("OK: /message/verify")
    return True


def check_transfers(client: TestClient, mint: str, owner: str) -> bool:
    """Check SOL and token transfer builders."""
    ok = True
    sol = client.post(
        "/send/sol",
        json={"from": SYSTEM_PROGRAM, "to": SYSTEM_PROGRAM, "lamports": 1000},
    )
    token = client.post(
        "/send/token",
        json={"destination": mint, "mint": mint, "owner": owner, "amount": 1},
    )
    for path, response in [("/send/sol", sol), ("/send/token", token)]:
        if response.status_code == 200:
            print(f"OK: {path}")
        else:
            print(f"FAIL: {path} - {response.json().get('error')}")
            ok = False
    return ok


def main() -> int:
    """Run smoke checks."""
    print("=" * 60)
    print("Gateway Smoke Test")
    print("=" * 60)

    client = TestClient(create_app(ServerConfig()))
    checks_passed = 0
    checks_failed = 0

    print("\n[1/4] Checking keypair...")
    keys = check_keypair(client)
    if keys is None:
        print("\nRESULT: keypair generation failed, aborting")
        return 1
    checks_passed += 1

    # A second keypair plays the mint
    mint = client.post("/keypair").json()["data"]["pubkey"]

    print("\n[2/4] Checking token instructions...")
    if check_tokens(client, mint, keys["pubkey"]):
        checks_passed += 1
    else:
        checks_failed += 1

    print("\n[3/4] Checking messages...")
    if check_messages(client, keys["secret"], keys["pubkey"]):
        checks_passed += 1
    else:
        checks_failed += 1

    print("\n[4/4] Checking transfers...")
    if check_transfers(client, mint, keys["pubkey"]):
        checks_passed += 1
    else:
        checks_failed += 1

    print("\n" + "=" * 60)
    if checks_failed == 0:
        print(f"RESULT: ALL PASSED ({checks_passed} checks)")
        print("=" * 60)
        return 0
    else:
        print(f"RESULT: {checks_passed} passed, {checks_failed} failed")
        print("=" * 60)
        return 1


if __name__ == "__main__":
    sys.exit(main())
