"""
collection_utils – Main entry point.

Minimal bootstrap script that loads settings and exercises one helper from
each utility group to verify the project is wired up.
"""

from src.config.settings import get_settings
from src.utils.array import arr_to_string, remove_duplicated
from src.utils.number import mins_to_hours_and_mins
from src.utils.object import sort_by_property


def main() -> None:
    """Print a bootstrap confirmation message with sample results."""
    settings = get_settings()
    seed = settings.random_seed if settings.random_seed is not None else "unset"

    print("collection_utils bootstrap complete")
    print(f"  random seed: {seed}")
    print(f"  array:  {arr_to_string(remove_duplicated(['a', 'b', 'a', 'c']))}")
    print(f"  number: {mins_to_hours_and_mins(90).as_dict()}")
    records = sort_by_property([{"age": 20}, {"age": 100}, {"age": 30}], "age")
    print(f"  object: {[record['age'] for record in records]}")


if __name__ == "__main__":
    main()
