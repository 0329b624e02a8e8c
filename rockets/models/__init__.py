from rockets.models.provider import LaunchServiceProvider
from rockets.models.rocket import Rocket
from rockets.models.launch import Launch, LaunchOutcome

__all__ = ["LaunchServiceProvider", "Rocket", "Launch", "LaunchOutcome"]
