from __future__ import annotations

from flask import Flask, request

from ..common.responses import error_response, fail, ok
from ..common.validators import parse_bool
from ..container import Container
from ..core.constants import ALL_DEPARTMENTS
from .presenters import game_date_to_dict, status_value, view_to_dict, volunteer_to_dict


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    def _criteria() -> dict:
        return {
            "search_text": request.args.get("search", ""),
            "department": request.args.get("department") or ALL_DEPARTMENTS,
            "include_inactive": parse_bool(request.args.get("include_inactive")),
        }

    @app.route("/api/overview", methods=["GET"], endpoint="overview")
    def overview():
        """Reload the board from the store and return the whole overview."""
        try:
            board = service.load()
            views = service.filter_views(**_criteria())
            return ok(
                dates=[game_date_to_dict(d) for d in board.dates],
                departments=service.departments(),
                volunteers=[view_to_dict(v) for v in views],
            )
        except Exception as e:
            return error_response(e, action="load the overview")

    @app.route("/api/volunteers", methods=["GET"], endpoint="list_volunteers")
    def list_volunteers():
        try:
            views = service.filter_views(**_criteria())
            return ok(volunteers=[view_to_dict(v) for v in views])
        except Exception as e:
            return error_response(e, action="list volunteers")

    @app.route("/api/volunteers/by-department", methods=["GET"], endpoint="volunteers_by_department")
    def volunteers_by_department():
        try:
            groups = service.views_by_department(**_criteria())
            return ok(departments={dept: [view_to_dict(v) for v in views] for dept, views in groups.items()})
        except Exception as e:
            return error_response(e, action="group volunteers")

    @app.route("/api/volunteers/<int:volunteer_id>", methods=["GET"], endpoint="volunteer_detail")
    def volunteer_detail(volunteer_id: int):
        try:
            view = service.view_for(volunteer_id)
            dates = service.board.dates
            history = [
                {**game_date_to_dict(d), "status": status_value(view.status_on(d.date_id))}
                for d in dates
            ]
            return ok(volunteer=view_to_dict(view), history=history)
        except Exception as e:
            return error_response(e, action="load the volunteer")

    @app.route(
        "/api/volunteers/<int:volunteer_id>/dates/<int:date_id>/status",
        methods=["PUT"],
        endpoint="set_status",
    )
    def set_status(volunteer_id: int, date_id: int):
        data = request.get_json(silent=True) or {}
        status = data.get("status")
        if not status:
            return fail("status is required", 400)

        try:
            view = service.set_status(volunteer_id, date_id, status)
            return ok(volunteer=view_to_dict(view))
        except Exception as e:
            return error_response(e, action="update the status")

    @app.route(
        "/api/volunteers/<int:volunteer_id>/dates/<int:date_id>/status",
        methods=["DELETE"],
        endpoint="clear_status",
    )
    def clear_status(volunteer_id: int, date_id: int):
        try:
            view = service.clear_status(volunteer_id, date_id)
            return ok(volunteer=view_to_dict(view))
        except Exception as e:
            return error_response(e, action="remove the status")

    @app.route("/api/volunteers/<int:volunteer_id>/toggle-active", methods=["POST"], endpoint="toggle_active")
    def toggle_active(volunteer_id: int):
        try:
            volunteer = service.toggle_active(volunteer_id)
            return ok(volunteer=volunteer_to_dict(volunteer))
        except Exception as e:
            return error_response(e, action="update the volunteer")
