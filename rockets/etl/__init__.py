from rockets.etl.baseetl import BaseETL, CatalogError
from rockets.etl.provideretl import ProviderETL
from rockets.etl.rocketetl import RocketETL
from rockets.etl.launchetl import LaunchETL

__all__ = ["BaseETL", "CatalogError", "ProviderETL", "RocketETL", "LaunchETL"]
