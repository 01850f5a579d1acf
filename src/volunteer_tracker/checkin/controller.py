from __future__ import annotations

from flask import Flask, request

from ..attendance.presenters import game_date_to_dict, view_to_dict, volunteer_to_dict
from ..common.datetime_utils import today_local
from ..common.responses import error_response, fail, ok
from ..container import Container


def register(app: Flask, container: Container) -> None:
    service = container.checkin_service

    @app.route("/api/checkin", methods=["GET"], endpoint="checkin_desk")
    def checkin_desk():
        """Current game date plus everyone scheduled (or already present) for it."""
        try:
            container.attendance_service.load()
            today = today_local()
            current = service.current_game_date(today=today)
            if current is None:
                return ok(game_date=None, is_today=False, roster={})

            roster = service.roster(current.date_id)
            return ok(
                game_date=game_date_to_dict(current),
                is_today=current.game_date == today,
                roster={
                    dept: [{**volunteer_to_dict(e.volunteer), "status": e.status.value} for e in entries]
                    for dept, entries in roster.items()
                },
            )
        except Exception as e:
            return error_response(e, action="load the check-in desk")

    @app.route("/api/checkin/suggestions", methods=["GET"], endpoint="checkin_suggestions")
    def checkin_suggestions():
        try:
            matches = service.suggest(request.args.get("q", ""))
            return ok(suggestions=[volunteer_to_dict(v) for v in matches])
        except Exception as e:
            return error_response(e, action="search volunteers")

    @app.route("/api/checkin", methods=["POST"], endpoint="checkin_mark_present")
    def checkin_mark_present():
        data = request.get_json(silent=True) or {}
        name = (data.get("name") or "").strip()
        if not name:
            return fail("Volunteer name is required", 400)

        date_id = data.get("date_id")
        if date_id is not None:
            try:
                date_id = int(date_id)
            except (TypeError, ValueError):
                return fail("date_id must be an integer", 400)

        try:
            view = service.mark_present(name, date_id=date_id)
            return ok(volunteer=view_to_dict(view), message=f"{view.volunteer.full_name} marked present")
        except Exception as e:
            return error_response(e, action="mark the volunteer present")
