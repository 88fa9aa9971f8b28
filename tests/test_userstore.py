import pytest

from opinionated.user import RECORD_SIZE, User
from opinionated.userstore import (
    MISSING_DIGIT,
    MISSING_LOWER,
    MISSING_UPPER,
    UserStore,
    is_valid_email,
    password_problems,
)

password = "password"


@pytest.fixture
def store(tmp_path):
    return UserStore(tmp_path / "Users.bin")


def _user(email, **extra):
    return User(email, password=password, **extra)


def test_missing_file_is_empty(store):
    assert store.count() == 0
    assert store.all() == []
    assert store.find("carol@example.com") is None


def test_add_writes_one_record(store):
    store.add(_user("carol@example.com"))
    assert store.path.stat().st_size == RECORD_SIZE
    assert store.count() == 1


def test_add_keeps_email_order(store):
    for email in ["dave@example.com", "alice@example.com", "carol@example.com"]:
        store.add(_user(email))
    emails = [user.email for user in store.all()]
    assert emails == sorted(emails)
    assert store.find("carol@example.com") == 1


def test_add_returns_position(store):
    store.add(_user("dave@example.com"))
    assert store.add(_user("alice@example.com")) == 0


def test_get_round_trips_fields(store):
    original = _user("carol@example.com", admin=True, surveys=3, questions=7, rank=2)
    position = store.add(original)
    loaded = store.get(position)
    assert (loaded.email, loaded.password, loaded.admin, loaded.surveys,
            loaded.questions, loaded.rank) == (
        original.email, original.password, original.admin, original.surveys,
        original.questions, original.rank)


def test_get_out_of_range(store):
    store.add(_user("carol@example.com"))
    with pytest.raises(IndexError):
        store.get(1)


def test_set_overwrites_record(store):
    position = store.add(_user("carol@example.com"))
    changed = _user("carol@example.com", rank=5)
    store.set(position, changed)
    assert store.get(position).rank == 5
    assert store.count() == 1


def test_set_out_of_range(store):
    with pytest.raises(IndexError):
        store.set(0, _user("carol@example.com"))


def test_delete_removes_user(store):
    for email in ["alice@example.com", "bob@example.com", "carol@example.com"]:
        store.add(_user(email))
    removed = store.delete(1)
    assert removed.email == "bob@example.com"
    assert [u.email for u in store.all()] == ["alice@example.com", "carol@example.com"]
    assert store.find("bob@example.com") is None


def test_delete_out_of_range(store):
    with pytest.raises(IndexError):
        store.delete(0)


def test_find_absent_between_entries(store):
    store.add(_user("alice@example.com"))
    store.add(_user("carol@example.com"))
    assert store.find("bob@example.com") is None


def test_verify(store):
    store.add(_user("carol@example.com"))
    assert store.verify("carol@example.com", password) is True
    assert store.verify("carol@example.com", "secret") is False
    assert store.verify("nobody@example.com", password) is False


def test_reset_empties(store):
    store.add(_user("carol@example.com"))
    store.reset()
    assert store.count() == 0
    assert store.path.exists()


@pytest.mark.parametrize(
    "email, expected",
    [
        ("alice@example.com", True),
        ("alice.smith@mail.example.com", True),
        ("a@example.com", False),
        (".alice@example.com", False),
        ("alice@example", False),
        ("alice.example.com", False),
        ("alice@@example.com", False),
    ],
)
def test_is_valid_email(email, expected):
    assert is_valid_email(email) is expected


def test_password_problems_all_missing():
    assert password_problems("") == [MISSING_UPPER, MISSING_LOWER, MISSING_DIGIT]


def test_password_problems_lowercase_only():
    assert password_problems(password) == [MISSING_UPPER, MISSING_DIGIT]


def test_password_problems_acceptable():
    candidate = password.capitalize() + "1"
    assert password_problems(candidate) == []


def test_password_problem_codes_match_messages():
    assert password_problems(password + "1") == [4]
    assert password_problems(password.upper() + "1") == [5]
    assert password_problems(password.capitalize()) == [6]