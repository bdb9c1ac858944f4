from storefront.domain.service.password_hasher import hash_password, verify_password


def test_round_trip():
    encoded = hash_password("correct horse", rounds=4)
    assert verify_password("correct horse", encoded)
    assert not verify_password("wrong horse", encoded)


def test_salted():
    assert hash_password("same", rounds=4) != hash_password("same", rounds=4)


def test_bcrypt_format_carries_cost():
    encoded = hash_password("pw", rounds=4)
    assert encoded.startswith("$2b$04$")
    assert len(encoded) == 60


def test_long_passwords_are_accepted():
    long_password = "x" * 100
    encoded = hash_password(long_password, rounds=4)
    assert verify_password(long_password, encoded)


def test_malformed_hash_never_verifies():
    assert not verify_password("pw", "not-a-hash")
    assert not verify_password("pw", "pbkdf2_sha256$1000$00$00")
    assert not verify_password("pw", "")
