"""Output formatting and export for draw results."""

import csv
from pathlib import Path

from secret_santa.types import DrawResult, DrawStatus


def print_draw_summary(result: DrawResult) -> None:
    """Pretty-print the solution count and the selected pairing."""
    print(f"Found {result.solution_count} possible unique pairings.")

    if result.status == DrawStatus.NO_VALID_PAIRING:
        print("No valid pairings could be found with these rules!")
        return

    print("\n--- Selected Pairing ---")
    for giver, receiver in result.pairs:
        print(f"{giver} 🎁 --> {receiver}")


def export_pairing_to_csv(result: DrawResult, filepath: Path | str) -> None:
    """Export the selected pairing to CSV, givers in participant order."""
    try:
        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.writer(f)
            writer.writerow(["giver", "receiver"])
            for giver, receiver in result.pairs:
                writer.writerow([giver, receiver])
    except OSError as e:
        raise OSError(f"Failed to write pairing to '{filepath}': {e}") from e
