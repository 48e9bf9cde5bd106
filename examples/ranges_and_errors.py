"""
Progression shapes, failure on unbounded ranges, and debug logging.

Run: python examples/ranges_and_errors.py
"""
from arrayfns import (
    InitCount,
    InitRange,
    NonFiniteRangeError,
    configure_logging,
    init,
    mean,
    EmptyCollectionError,
)


def main():
    # Log normalized progressions to stderr as JSON
    configure_logging("DEBUG", json_output=True)

    print(init(5))                                     # [0, 1, 2, 3, 4]
    print(init(InitCount(5, start=3)))                 # [3, 4, 5, 6, 7]
    print(init(InitRange(1, -1, -0.5)))                # [1, 0.5, 0.0, -0.5, -1.0]
    print(init({"from": 1, "to": 2, "increment": 5}))  # [1]

    try:
        init(InitRange(2, 1, 1))
    except NonFiniteRangeError as e:
        print("rejected =>", e)

    try:
        mean([])
    except EmptyCollectionError as e:
        print("rejected =>", e)


if __name__ == "__main__":
    main()
