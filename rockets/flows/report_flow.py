from datetime import date

from prefect import flow, get_run_logger, task
from prefect.cache_policies import NONE

from rockets.config import DEFAULT_TOP_K, LOG_LEVEL, REPORT_ORBIT
from rockets.flows.etl_flow import main_pipeline
from rockets.mining import MiningError, RocketMiner
from rockets.utils.utils import setup_logging


def describe(value):
    """Render query results as plain strings for the report."""
    if isinstance(value, list):
        return [describe(item) for item in value]
    name = getattr(value, "name", None)
    if name is not None:
        return name
    launch_id = getattr(value, "id", None)
    if launch_id is not None:
        return launch_id
    return str(value)


def build_report(
    miner: RocketMiner, k: int, orbit: str, year: int, logger
) -> dict:
    queries = {
        "most_launched_rockets": lambda: miner.most_launched_rockets(k),
        "most_reliable_launch_service_providers": lambda: miner.most_reliable_launch_service_providers(k),
        "most_recent_launches": lambda: miner.most_recent_launches(k),
        "most_expensive_launches": lambda: miner.most_expensive_launches(k),
        "dominant_country": lambda: miner.dominant_country(orbit),
        "highest_revenue_launch_service_providers": lambda: miner.highest_revenue_launch_service_providers(k, year),
        "successful_launch_rate_in_year": lambda: miner.successful_launch_rate_in_year(year),
    }

    report = {"k": k, "orbit": orbit, "year": year, "results": {}, "errors": {}}
    for name, query in queries.items():
        try:
            result = describe(query())
        except MiningError as e:
            logger.warning("%s failed: %s", name, e)
            report["errors"][name] = str(e)
            continue
        logger.info("%s: %s", name, result)
        report["results"][name] = result

    return report


@task(name="Report", cache_policy=NONE)
def report_task(miner: RocketMiner, k: int, orbit: str, year: int) -> dict:
    return build_report(miner, k, orbit, year, get_run_logger())


@flow
def mining_report(
    source: str | None = None,
    k: int = DEFAULT_TOP_K,
    orbit: str = REPORT_ORBIT,
    year: int | None = None,
) -> dict:
    repository = main_pipeline(source)
    year = year if year is not None else date.today().year
    return report_task(RocketMiner(repository), k, orbit, year)


if __name__ == "__main__":
    setup_logging(LOG_LEVEL)
    mining_report()
