from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Optional

from rockets.models.provider import LaunchServiceProvider
from rockets.models.rocket import Rocket


class LaunchOutcome(str, Enum):
    SUCCESSFUL = "SUCCESSFUL"
    FAILED = "FAILED"


@dataclass(frozen=True)
class Launch:
    # Identifiers
    id: str

    # Timing
    launch_date: date

    # Hardware
    launch_vehicle: Rocket
    launch_service_provider: LaunchServiceProvider

    # Mission
    orbit: str
    launch_site: str
    price: Decimal
    outcome: LaunchOutcome
    function: Optional[str] = None
