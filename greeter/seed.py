# greeter/seed.py
"""
Load users from a CSV file (header: first_name,last_name,email) into a registry.
"""

import csv
import logging

from greeter.registry.errors import UserRegistryError
from greeter.registry.users import UserRegistry

logger = logging.getLogger(__name__)

COLUMNS = ("first_name", "last_name", "email")


def parse_users_csv(file_path: str):
    rows = []
    n_rows = 0
    n_errors = 0
    error_examples = []

    with open(file_path, newline="") as f:
        reader = csv.DictReader(f)

        for row in reader:
            n_rows += 1

            missing = [col for col in COLUMNS if row.get(col) is None]
            if missing:
                n_errors += 1
                if len(error_examples) < 5:
                    error_examples.append(
                        {
                            "row_number": n_rows,
                            "error": f"missing column(s): {', '.join(missing)}",
                        }
                    )
                continue

            rows.append(
                {
                    "row_number": n_rows,
                    "first_name": row["first_name"].strip(),
                    "last_name": row["last_name"].strip(),
                    "email": row["email"].strip(),
                }
            )

    stats = {
        "n_rows": n_rows,
        "n_parsed": len(rows),
        "n_errors": n_errors,
        "error_examples": error_examples,
    }
    return rows, stats


def load_into_registry(registry: UserRegistry, rows) -> dict:
    """
    Add parsed rows in order. Rejected rows are counted, never fatal.
    """
    n_added = 0
    n_rejected = 0
    rejected_examples = []

    for row in rows:
        try:
            registry.add_user(row["first_name"], row["last_name"], row["email"])
            n_added += 1
        except UserRegistryError as e:
            n_rejected += 1
            logger.warning("Row %s rejected: %s", row["row_number"], e)
            if len(rejected_examples) < 5:
                rejected_examples.append(
                    {"row_number": row["row_number"], "error": str(e)}
                )

    return {
        "n_added": n_added,
        "n_rejected": n_rejected,
        "rejected_examples": rejected_examples,
    }


def seed_registry(registry: UserRegistry, file_path: str) -> dict:
    rows, parse_stats = parse_users_csv(file_path)
    load_stats = load_into_registry(registry, rows)

    for ex in parse_stats["error_examples"]:
        logger.warning("Row %s: %s", ex["row_number"], ex["error"])

    logger.info(
        "Seeded %s user(s) from %s (%s row(s) read, %s malformed, %s rejected)",
        load_stats["n_added"],
        file_path,
        parse_stats["n_rows"],
        parse_stats["n_errors"],
        load_stats["n_rejected"],
    )
    return {**parse_stats, **load_stats}
