import pytest

from cshare.errors import MissingCredentialError
from cshare.session_store import CredentialStore


def test_save_then_load_returns_token(tmp_path):
    store = CredentialStore(tmp_path / ".env")
    store.save("abc")
    assert store.load() == "abc"


def test_file_holds_single_key_value_line(tmp_path):
    path = tmp_path / ".env"
    CredentialStore(path).save("abc")
    assert path.read_text(encoding="utf-8") == "auth_token=abc\n"


def test_second_save_overwrites_first(tmp_path):
    store = CredentialStore(tmp_path / ".env")
    store.save("first")
    store.save("second")
    assert store.load() == "second"
    assert store.path.read_text(encoding="utf-8").count("auth_token=") == 1


def test_load_survives_new_instance(tmp_path):
    CredentialStore(tmp_path / ".env").save("persisted")
    assert CredentialStore(tmp_path / ".env").load() == "persisted"


def test_missing_file_raises(tmp_path):
    store = CredentialStore(tmp_path / "nope.env")
    assert not store.exists()
    with pytest.raises(MissingCredentialError):
        store.load()


@pytest.mark.parametrize("text", ["", "garbage", "other=1\n", "auth_token=\n"])
def test_malformed_file_raises(tmp_path, text):
    path = tmp_path / ".env"
    path.write_text(text, encoding="utf-8")
    with pytest.raises(MissingCredentialError):
        CredentialStore(path).load()


def test_load_ignores_comments_and_quotes(tmp_path):
    path = tmp_path / ".env"
    path.write_text('# saved by hand\n\nauth_token="tok=en"\n', encoding="utf-8")
    assert CredentialStore(path).load() == "tok=en"
