"""Example: drive the clock-in policy through the service layer (no Flask).

Controllers are thin; the decision lives in ClockInService.
"""

import importlib

from config import get_settings_module

from src.workforce_attendance.workforce_attendance.container import build_container
from src.workforce_attendance.workforce_attendance.core.enums import WorkMode
from src.workforce_attendance.workforce_attendance.geo.location import Coordinate, StaticLocationProvider


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG, settings=settings)

    here = StaticLocationProvider(Coordinate(latitude=40.7128, longitude=-74.0060))
    outcome = container.clock_in_service.attempt_clock_in(3, WorkMode.OFFICE, here, company_id=1)
    print(outcome.to_dict())


if __name__ == "__main__":
    main()
