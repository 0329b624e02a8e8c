from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class LaunchServiceProvider:
    # Identity is (name, year_founded, country); id is the catalog key only
    id: str = field(compare=False)
    name: str
    year_founded: int
    country: str
    headquarters: Optional[str] = field(default=None, compare=False)
