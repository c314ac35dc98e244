"""Load test records from YAML or JSON results files."""

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from boostsec.test_logger.models.test_record import TestRecord

logger = logging.getLogger(__name__)


def load_test_records(results_file: Path) -> list[TestRecord]:
    """Load test records from a results file.

    The file holds a mapping with a ``results`` list, one entry per test.
    JSON files are accepted as well since JSON is valid YAML.

    Args:
        results_file: Path to the results file

    Returns:
        Parsed test records, in file order

    Raises:
        FileNotFoundError: If the file doesn't exist
        ValueError: If the content is invalid or doesn't match the schema

    """
    if not results_file.exists():
        raise FileNotFoundError(f"Results file not found: {results_file}")

    try:
        with results_file.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {results_file}: {e}") from e

    if data is None:
        raise ValueError(f"Empty results file: {results_file}")

    if not isinstance(data, dict) or not isinstance(data.get("results"), list):
        raise ValueError(f"Expected a 'results' list in {results_file}")

    records: list[TestRecord] = []
    for index, entry in enumerate(data["results"]):
        try:
            records.append(TestRecord.model_validate(entry))
        except ValidationError as e:
            raise ValueError(
                f"Invalid test record #{index} in {results_file}: {e}"
            ) from e

    logger.info(f"Loaded {len(records)} test records from {results_file}")
    return records
