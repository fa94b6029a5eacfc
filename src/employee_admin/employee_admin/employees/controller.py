from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, flash, redirect, render_template, request, url_for

from ..auth.controller import admin_required, current_user_detail
from ..core.enums import Role
from ..core.errors import ErrorKind, as_field_error, is_error
from ..core.exceptions import DuplicateKeyError
from ..container import Container
from .form import draft_from_form, validate_employee
from .model import EmployeeDraft

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.employee_service

    def _render_new(draft: EmployeeDraft, errors: Optional[dict] = None):
        return render_template(
            "employees/new.html",
            employee=draft,
            errors=errors or {},
            is_edit=False,
            roles=list(Role),
            active_page="employees",
        )

    def _render_edit(draft: EmployeeDraft, errors: Optional[dict] = None):
        return render_template(
            "employees/edit.html",
            employee=draft,
            errors=errors or {},
            is_edit=True,
            roles=list(Role),
            active_page="employees",
        )

    def _redirect_to_list():
        return redirect(url_for("employee_list"))

    @app.route("/employees/", endpoint="employee_list")
    @admin_required
    def employee_list():
        employees = service.find_all()
        return render_template(
            "employees/list.html",
            employee_list=employees,
            list_size=len(employees),
            active_page="employees",
        )

    @app.route("/employees/<code>", endpoint="employee_detail")
    @admin_required
    def employee_detail(code: str):
        employee = service.find_by_code(code)
        if employee is None:
            # deleted by another request in the meantime
            return _redirect_to_list()

        return render_template("employees/detail.html", employee=employee, errors={}, active_page="employees")

    @app.route("/employees/add", methods=["GET"], endpoint="employee_create")
    @admin_required
    def employee_create():
        return _render_new(EmployeeDraft())

    @app.route("/employees/add", methods=["POST"], endpoint="employee_add")
    @admin_required
    def employee_add():
        draft = draft_from_form(request.form)

        # Blank is accepted on update (keeps the stored password), so it is
        # rejected here rather than in validate_employee.
        if draft.password == "":
            return _render_new(draft, as_field_error(ErrorKind.BLANK_ERROR))

        errors = validate_employee(draft)
        if errors:
            logger.debug("employee registration rejected: %s", errors)
            return _render_new(draft, errors)

        try:
            result = service.save(draft)
        except DuplicateKeyError:
            return _render_new(draft, as_field_error(ErrorKind.DUPLICATE_EXCEPTION_ERROR))

        if is_error(result):
            return _render_new(draft, as_field_error(result))

        flash(f"Employee {draft.code} registered.", "success")
        return _redirect_to_list()

    @app.route("/employees/<code>/delete", methods=["POST"], endpoint="employee_delete")
    @admin_required
    def employee_delete(code: str):
        result = service.delete(code, current_user_detail())

        if is_error(result):
            return render_template(
                "employees/detail.html",
                employee=service.find_by_code(code),
                errors=as_field_error(result),
                active_page="employees",
            )

        flash(f"Employee {code} deleted.", "success")
        return _redirect_to_list()

    @app.route("/employees/<code>/update", methods=["GET"], endpoint="employee_edit")
    @admin_required
    def employee_edit(code: str):
        employee = service.find_by_code(code)
        if employee is None:
            # deleted by another request in the meantime
            return _redirect_to_list()

        return _render_edit(EmployeeDraft.from_employee(employee))

    @app.route("/employees/<code>/update", methods=["POST"], endpoint="employee_update")
    @admin_required
    def employee_update(code: str):
        draft = draft_from_form(request.form, code=code)

        errors = validate_employee(draft)
        if errors:
            logger.debug("employee %s update rejected: %s", code, errors)
            return _render_edit(draft, errors)

        result = service.update(draft)
        if is_error(result):
            return _render_edit(draft, as_field_error(result))

        flash(f"Employee {code} updated.", "success")
        return _redirect_to_list()
