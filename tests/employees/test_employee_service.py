from __future__ import annotations

import pytest
from werkzeug.security import check_password_hash

from conftest import make_employee
from employee_admin.auth.model import UserDetail
from employee_admin.core.enums import Role
from employee_admin.core.errors import ErrorKind
from employee_admin.core.exceptions import DuplicateKeyError
from employee_admin.employees.model import EmployeeDraft

ADMIN = UserDetail(code="admin", name="Admin", role=Role.ADMIN)


def test_find_all_skips_soft_deleted(repo, service):
    repo.rows["E002"] = make_employee("E002", delete_flg=True)

    assert [e.code for e in service.find_all()] == ["E001", "admin"]


def test_find_by_code_returns_none_for_soft_deleted(repo, service):
    repo.rows["E002"] = make_employee("E002", delete_flg=True)

    assert service.find_by_code("E002") is None
    assert service.find_by_code("missing") is None
    assert service.find_by_code("E001").name == "Suzuki"


def test_save_hashes_password_and_sets_timestamps(repo, service, fixed_now):
    result = service.save(EmployeeDraft(code="E100", name="Tanaka", role="ADMIN", password="abcd1234"))

    assert result is None
    saved = repo.rows["E100"]
    assert saved.role == Role.ADMIN
    assert saved.password != "abcd1234"
    assert check_password_hash(saved.password, "abcd1234")
    assert saved.created_at == fixed_now
    assert saved.updated_at == fixed_now
    assert not saved.delete_flg


@pytest.mark.parametrize(
    "password, expected",
    [
        ("abc-1234", ErrorKind.HALFSIZE_ERROR),
        ("ｐａｓｓｗｏｒｄ１", ErrorKind.HALFSIZE_ERROR),
        ("abc1234", ErrorKind.RANGECHECK_ERROR),
        ("a" * 17, ErrorKind.RANGECHECK_ERROR),
    ],
)
def test_save_rejects_invalid_password(repo, service, password, expected):
    result = service.save(EmployeeDraft(code="E100", name="Tanaka", role="GENERAL", password=password))

    assert result == expected
    assert "E100" not in repo.rows


def test_save_reports_duplicate_for_active_code(repo, service):
    result = service.save(EmployeeDraft(code="E001", name="Other", role="GENERAL", password="abcd1234"))

    assert result == ErrorKind.DUPLICATE_ERROR
    assert repo.rows["E001"].name == "Suzuki"


def test_save_lets_storage_duplicate_propagate_for_soft_deleted_code(repo, service):
    repo.rows["E002"] = make_employee("E002", delete_flg=True)

    with pytest.raises(DuplicateKeyError):
        service.save(EmployeeDraft(code="E002", name="Again", role="GENERAL", password="abcd1234"))


def test_update_with_blank_password_keeps_stored_hash(repo, service, fixed_now):
    before = repo.rows["E001"]

    result = service.update(EmployeeDraft(code="E001", name="Suzuki Ichiro", role="ADMIN", password=""))

    assert result is None
    after = repo.rows["E001"]
    assert after.name == "Suzuki Ichiro"
    assert after.role == Role.ADMIN
    assert after.password == before.password
    assert after.created_at == before.created_at
    assert after.updated_at == fixed_now


def test_update_with_new_password_rehashes(repo, service):
    result = service.update(EmployeeDraft(code="E001", name="Suzuki", role="GENERAL", password="newpass99"))

    assert result is None
    assert check_password_hash(repo.rows["E001"].password, "newpass99")


def test_update_rejects_invalid_password_without_writing(repo, service):
    before = repo.rows["E001"]

    result = service.update(EmployeeDraft(code="E001", name="Changed", role="GENERAL", password="short"))

    assert result == ErrorKind.RANGECHECK_ERROR
    assert repo.rows["E001"] == before


def test_update_unknown_code_is_not_found(service):
    result = service.update(EmployeeDraft(code="nobody", name="X", role="GENERAL", password=""))

    assert result == ErrorKind.NOT_FOUND_ERROR


def test_delete_marks_record_and_records_actor(repo, service, fixed_now):
    result = service.delete("E001", ADMIN)

    assert result is None
    row = repo.rows["E001"]
    assert row.delete_flg
    assert row.deleted_by == "admin"
    assert row.updated_at == fixed_now


def test_delete_twice_reports_not_found(repo, service):
    assert service.delete("E001", ADMIN) is None

    assert service.delete("E001", ADMIN) == ErrorKind.NOT_FOUND_ERROR


def test_delete_unknown_code_reports_not_found(repo, service):
    assert service.delete("nobody", ADMIN) == ErrorKind.NOT_FOUND_ERROR


def test_delete_self_is_refused(repo, service):
    assert service.delete("admin", ADMIN) == ErrorKind.LOGINCHECK_ERROR
    assert not repo.rows["admin"].delete_flg
