# parse_users.py
"""
Dry-run a users CSV into an empty registry and print basic stats.

Usage:
    python parse_users.py data/users.csv
"""

import sys

from greeter.registry.users import UserRegistry
from greeter.seed import load_into_registry, parse_users_csv


def main(argv=None):
    argv = sys.argv[1:] if argv is None else argv
    if len(argv) != 1:
        print("usage: parse_users.py <users.csv>", file=sys.stderr)
        return 2

    rows, stats = parse_users_csv(argv[0])
    load_stats = load_into_registry(UserRegistry(), rows)

    print(f"Total CSV rows read:   {stats['n_rows']}")
    print(f"Malformed rows:        {stats['n_errors']}")
    print(f"Users accepted:        {load_stats['n_added']}")
    print(f"Users rejected:        {load_stats['n_rejected']}")

    examples = stats["error_examples"] + load_stats["rejected_examples"]
    if examples:
        print("\nExample errors:")
        for ex in examples:
            print(f"- Row {ex['row_number']}: {ex['error']}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
