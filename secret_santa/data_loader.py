"""Load participants and exclusion rules from JSON or CSV files."""

import json
from pathlib import Path

import pandas as pd

from secret_santa.exclusions import validate_participants
from secret_santa.types import Exclusion, SantaConfig


def _parse_exclusion(entry: object, position: int, filepath: Path) -> Exclusion:
    if not isinstance(entry, dict):
        raise ValueError(f"Exclusion #{position} in {filepath} is not an object")
    try:
        giver = entry["giver"]
        receiver = entry["receiver"]
    except KeyError as e:
        raise ValueError(
            f"Exclusion #{position} in {filepath} is missing '{e.args[0]}'"
        ) from e
    if not isinstance(giver, str) or not isinstance(receiver, str):
        raise ValueError(f"Exclusion #{position} in {filepath} must use strings")
    return Exclusion(giver=giver, receiver=receiver)


def load_config_from_json(filepath: Path | str) -> SantaConfig:
    """Load a config of the form ``{"participants": [...], "exclusions": [...]}``.

    Args:
        filepath: Path to the JSON file. Each exclusion is an object with
            ``giver`` and ``receiver`` keys; ``exclusions`` may be omitted.

    Returns:
        The parsed SantaConfig.

    Raises:
        ValueError: If the file is not valid JSON or does not have that shape,
            or if a participant is listed twice.
    """
    if isinstance(filepath, str):
        filepath = Path(filepath)

    try:
        data = json.loads(filepath.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Could not parse JSON in {filepath}: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Config in {filepath} must be a JSON object")
    if "participants" not in data:
        raise ValueError(f"Config in {filepath} has no 'participants' list")

    participants = data["participants"]
    if not isinstance(participants, list) or not all(
        isinstance(p, str) for p in participants
    ):
        raise ValueError(f"'participants' in {filepath} must be a list of strings")

    raw_exclusions = data.get("exclusions") or []
    if not isinstance(raw_exclusions, list):
        raise ValueError(f"'exclusions' in {filepath} must be a list")

    exclusions = [
        _parse_exclusion(entry, position, filepath)
        for position, entry in enumerate(raw_exclusions, start=1)
    ]

    validate_participants(participants)
    return SantaConfig(participants=participants, exclusions=exclusions)


def load_config_from_csv(filepath: Path | str) -> SantaConfig:
    """Load a config from a CSV file.

    Args:
        filepath: Path to CSV where the 1st column is participants and every
            non-empty cell after it names a receiver that participant must not
            draw (any number of columns).

    Returns:
        SantaConfig with one exclusion per non-empty cell, in row order.

    Raises:
        ValueError: If the CSV is empty, malformed, has a blank participant,
            or lists a participant twice.
    """
    if isinstance(filepath, str):
        filepath = Path(filepath)

    try:
        df = pd.read_csv(
            filepath,
            index_col=0,
            dtype=str,
            keep_default_na=False,
            na_values=[""],
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError as e:
        raise ValueError(f"CSV file is empty: {filepath}") from e
    except pd.errors.ParserError as e:
        raise ValueError(f"Failed to parse CSV: {e}") from e

    if len(df.index) == 0:
        raise ValueError(f"CSV file contains no data rows: {filepath}")

    if df.index.isna().any():
        raise ValueError(f"CSV file has a row without a participant: {filepath}")

    participants = [str(p).strip() for p in df.index]
    validate_participants(participants)

    exclusions = [
        Exclusion(giver=giver, receiver=str(receiver).strip())
        for giver, row in zip(participants, df.itertuples(index=False))
        for receiver in row
        if pd.notna(receiver)
    ]

    return SantaConfig(participants=participants, exclusions=exclusions)


def load_config(filepath: Path | str) -> SantaConfig:
    """Load a config, choosing the format from the file suffix.

    Raises:
        ValueError: For unsupported suffixes or invalid content.
    """
    if isinstance(filepath, str):
        filepath = Path(filepath)

    suffix = filepath.suffix.lower()
    if suffix == ".json":
        return load_config_from_json(filepath)
    if suffix == ".csv":
        return load_config_from_csv(filepath)
    raise ValueError(f"Unsupported config format '{suffix}': {filepath}")
