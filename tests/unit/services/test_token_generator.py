"""
Unit tests for TokenGenerator

Entropy source and clock are injected so every assertion is deterministic.
"""
import re
from datetime import datetime, timedelta

import pytest

from account_recovery.app.services.token_generator import TokenGenerator, hash_token
from account_recovery.domain.entities import TokenPurpose

FIXED_NOW = datetime(2026, 1, 15, 12, 0, 0)


def fixed_entropy(n: int) -> bytes:
    return bytes(range(n))


def test_reset_token_expires_in_one_hour():
    generator = TokenGenerator(entropy=fixed_entropy, clock=lambda: FIXED_NOW)

    generated = generator.generate(TokenPurpose.password_reset)

    assert generated.expires_at == FIXED_NOW + timedelta(hours=1)


def test_verification_token_expires_in_24_hours():
    generator = TokenGenerator(entropy=fixed_entropy, clock=lambda: FIXED_NOW)

    generated = generator.generate(TokenPurpose.email_verification)

    assert generated.expires_at == FIXED_NOW + timedelta(hours=24)


def test_token_is_hex_encoding_of_32_entropy_bytes():
    requested = []

    def recording_entropy(n: int) -> bytes:
        requested.append(n)
        return fixed_entropy(n)

    generator = TokenGenerator(entropy=recording_entropy, clock=lambda: FIXED_NOW)

    generated = generator.generate(TokenPurpose.password_reset)

    assert requested == [32]
    assert generated.token == bytes(range(32)).hex()
    assert len(generated.token) == 64


def test_short_entropy_source_is_rejected():
    generator = TokenGenerator(entropy=lambda n: b"\x00" * 8, clock=lambda: FIXED_NOW)

    with pytest.raises(ValueError):
        generator.generate(TokenPurpose.password_reset)


def test_default_generator_produces_distinct_hex_tokens():
    generator = TokenGenerator()

    tokens = {generator.generate(TokenPurpose.password_reset).token for _ in range(50)}

    assert len(tokens) == 50
    assert all(re.fullmatch(r"[0-9a-f]{64}", token) for token in tokens)


def test_hash_token_is_sha256_hex():
    assert hash_token("abc") == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    assert hash_token("abc") != hash_token("abd")
