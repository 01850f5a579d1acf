"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; the attendance rules live in the services.
"""

import importlib

from volunteer_tracker.config import get_settings_module
from volunteer_tracker.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    service = container.attendance_service

    for view in service.filter_views(search_text="jo"):
        s = view.summary
        print(f"{view.volunteer.full_name:<30} {s.present}/{s.total} present ({s.attendance_rate:.0f}%)")


if __name__ == "__main__":
    main()
