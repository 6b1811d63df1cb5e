"""Unit tests for password hashing and Gravatar URLs."""

from infrastructure.auth.avatar import gravatar_url
from infrastructure.auth.passwords import hash_password, verify_password


class TestPasswords:
    def test_hash_is_salted(self):
        first = hash_password("secret123")
        second = hash_password("secret123")

        assert first != second
        assert first != "secret123"
        assert verify_password("secret123", first)
        assert verify_password("secret123", second)

    def test_wrong_password(self):
        assert not verify_password("wrong", hash_password("secret123"))

    def test_long_passwords_compare_on_first_72_bytes(self):
        hashed = hash_password("a" * 72 + "tail-one")

        assert verify_password("a" * 72 + "tail-two", hashed)


class TestGravatar:
    def test_url_shape(self):
        url = gravatar_url("Jane@Example.com ")

        # md5("jane@example.com")
        assert url.startswith("//www.gravatar.com/avatar/9e26471d35a78862c17e467d87cddedf")
        assert "s=200" in url
        assert "r=pg" in url
        assert "d=mm" in url

    def test_custom_options(self):
        url = gravatar_url("jane@example.com", size=80, rating="g", default="identicon")

        assert url.endswith("?s=80&r=g&d=identicon")
