from __future__ import annotations

from functools import wraps
from typing import Optional

from flask import Flask, flash, redirect, render_template, request, session, url_for

from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..container import Container
from .model import UserDetail


def current_user_detail() -> Optional[UserDetail]:
    if "code" not in session:
        return None
    return UserDetail(code=session["code"], name=session.get("name", ""), role=Role(session["role"]))


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "code" not in session:
            flash("Please log in to continue.", "warning")
            return redirect(url_for("login"))
        return view(*args, **kwargs)

    return wrapper


def admin_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if "code" not in session:
            return redirect(url_for("login"))

        if session.get("role") != Role.ADMIN.value:
            return render_template("403.html"), 403

        return view(*args, **kwargs)

    return wrapper


def register(app: Flask, container: Container) -> None:
    app.jinja_env.globals["csrf_token"] = lambda: ""
    app.jinja_env.globals["current_user"] = current_user_detail

    @app.route("/", endpoint="index")
    @login_required
    def index():
        return redirect(url_for("employee_list"))

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if "code" in session:
            return redirect(url_for("index"))

        if request.method == "POST":
            code = request.form.get("code", "")
            password = request.form.get("password", "")

            try:
                user = container.auth_service.authenticate(code, password)
            except AuthenticationError as e:
                flash(str(e), "danger")
                return render_template("login.html", code=code)

            session.clear()
            session["code"] = user.code
            session["name"] = user.name
            session["role"] = user.role.value
            app.logger.info("employee %s logged in", user.code)
            return redirect(url_for("index"))

        return render_template("login.html", code="")

    @app.route("/logout", endpoint="logout")
    def logout():
        session.clear()
        flash("You have been logged out.", "info")
        return redirect(url_for("login"))
