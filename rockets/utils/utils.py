import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from prefect.runtime import task_run

if TYPE_CHECKING:
    from rockets.etl import BaseETL


def parse_date(s: str | None) -> date | None:
    if not s or s.strip() == "":
        return None
    try:
        # Plain calendar date
        return datetime.strptime(s, "%Y-%m-%d").date()
    except ValueError:
        try:
            # Full ISO timestamp with microseconds
            return datetime.strptime(s, "%Y-%m-%dT%H:%M:%S.%fZ").date()
        except ValueError:
            # ISO timestamp without microseconds
            return datetime.strptime(s, "%Y-%m-%dT%H:%M:%SZ").date()


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def generate_task_run_name(step_name: str):
    def _generate_name():
        etl: "BaseETL" = task_run.get_parameters()["etl"]
        return f"{etl.name} - {step_name}"

    return _generate_name
