import logging
from pathlib import Path

import pytest

from userdir import SeedFileError, User
from userdir.seeds import load_seed, validate_seed_records


def _write(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "users.yaml"
    path.write_text(text)
    return path


def test_load_seed_from_list(tmp_path):
    path = _write(
        tmp_path,
        "- id: 7\n  email: ada@example.com\n  name: Ada Lovelace\n",
    )
    assert load_seed(path) == [User(7, "ada@example.com", "Ada Lovelace")]


def test_load_seed_from_users_key(tmp_path):
    path = _write(
        tmp_path,
        "users:\n"
        "  - id: 1\n    email: a@example.com\n    name: A\n"
        "  - id: 2\n    email: b@example.com\n    name: B\n",
    )
    assert [u.id for u in load_seed(path)] == [1, 2]


def test_load_seed_rejects_duplicate_ids(tmp_path):
    path = _write(
        tmp_path,
        "- {id: 1, email: a@example.com, name: A}\n- {id: 1, email: b@example.com, name: B}\n",
    )
    with pytest.raises(SeedFileError) as exc_info:
        load_seed(path)
    assert exc_info.value.errors == ["Duplicate user id: 1"]


def test_load_seed_missing_file(tmp_path):
    with pytest.raises(SeedFileError):
        load_seed(tmp_path / "missing.yaml")


def test_load_seed_invalid_yaml(tmp_path):
    path = _write(tmp_path, "users: [unclosed\n")
    with pytest.raises(SeedFileError):
        load_seed(path)


def test_validate_requires_list():
    assert validate_seed_records({"id": 1}) == ["Seed data must be a list of users"]


def test_validate_reports_missing_fields():
    errors = validate_seed_records([{"id": 1, "email": "a@example.com"}])
    assert errors == ["Entry 0 is missing: name"]


def test_validate_reports_bad_ids():
    errors = validate_seed_records(
        [
            {"id": "one", "email": "a@example.com", "name": "A"},
            {"id": True, "email": "b@example.com", "name": "B"},
            "not a mapping",
        ]
    )
    assert len(errors) == 3
    assert "non-integer id" in errors[0]
    assert "non-integer id" in errors[1]
    assert errors[2] == "Entry 2 is not a mapping"


def test_validate_accepts_good_records():
    assert validate_seed_records([{"id": 1, "email": "a@example.com", "name": "A"}]) == []


def test_load_seed_rejects_non_utf8(tmp_path):
    path = tmp_path / "users.yaml"
    path.write_bytes(b"- {id: 1, email: \xff\xfe, name: A}\n")
    with pytest.raises(SeedFileError):
        load_seed(path)


def test_load_seed_rejects_non_string_fields(tmp_path):
    path = _write(tmp_path, "- {id: 1, email: 123, name: null}\n")
    with pytest.raises(SeedFileError) as exc_info:
        load_seed(path)
    assert exc_info.value.errors == [
        "Entry 0 has a non-string email: 123",
        "Entry 0 has a non-string name: None",
    ]


def test_load_seed_logs_count(tmp_path, caplog):
    path = _write(tmp_path, "- {id: 1, email: a@example.com, name: A}\n")
    caplog.set_level(logging.INFO, logger="userdir.seeds")
    load_seed(path)
    assert "Loaded 1 seed users" in caplog.text
