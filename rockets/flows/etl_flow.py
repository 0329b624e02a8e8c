from prefect import flow, get_run_logger, task
from prefect.cache_policies import NONE
from prefect.futures import wait

from rockets.config import LOG_LEVEL, catalog_location
from rockets.dataaccess import InMemoryRepository
from rockets.etl import BaseETL, LaunchETL, ProviderETL, RocketETL
from rockets.utils.utils import generate_task_run_name, setup_logging

# Load order: every kind only references kinds listed before it
CATALOG_KINDS = {
    "Provider": (ProviderETL, "providers"),
    "Rocket": (RocketETL, "rockets"),
    "Launch": (LaunchETL, "launches"),
}


@task(
    name="Extract",
    task_run_name=generate_task_run_name("Extract"),
    cache_policy=NONE,
)
def extract_task(etl: BaseETL, source: str) -> list[dict]:
    return etl.extract(source)


@task(
    name="Transform",
    task_run_name=generate_task_run_name("Transform"),
    cache_policy=NONE,
)
def transform_task(etl: BaseETL, raw_data: list[dict]) -> list:
    return etl.transform(raw_data)


@task(
    name="Load",
    task_run_name=generate_task_run_name("Load"),
    cache_policy=NONE,
)
def load_task(etl: BaseETL, transformed_data: list) -> None:
    etl.load(transformed_data)
    get_run_logger().info("Loaded %d %s records", len(transformed_data), etl.name)


def build_etls(repository: InMemoryRepository, source: str | None = None):
    return {
        name: (etl_cls(repository), catalog_location(kind_name, source))
        for name, (etl_cls, kind_name) in CATALOG_KINDS.items()
    }


@flow
def main_pipeline(source: str | None = None) -> InMemoryRepository:
    repository = InMemoryRepository()
    etls = build_etls(repository, source)

    # Extract in Parallel
    futures_extract = extract_task.map(
        [etl for etl, _ in etls.values()],
        [location for _, location in etls.values()],
    )
    wait(futures_extract)
    results_raw_data = [f.result() for f in futures_extract]

    # Transform and load one kind at a time so references resolve
    for (etl, _), raw_data in zip(etls.values(), results_raw_data):
        transformed = transform_task(etl, raw_data)
        load_task(etl, transformed)

    return repository


if __name__ == "__main__":
    setup_logging(LOG_LEVEL)
    main_pipeline()
