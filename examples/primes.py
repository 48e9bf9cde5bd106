"""
Primes below 100, once with nested helper calls and once with a chain.

Run: python examples/primes.py
"""
from arrayfns import count, filter, init, init_chain, map


def primes_nested():
    numbers = init({"from": 1, "to": 100})
    with_factors = map(numbers, lambda x, _: (x, filter(init({"from": 1, "to": x}), lambda y, _: x % y == 0)))
    return [x for x, factors in with_factors if count(factors) == 2]


def primes_chained():
    return (
        init_chain({"from": 1, "to": 100})
        .map(lambda x, _: (x, init_chain({"from": 1, "to": x}).filter(lambda y, _: x % y == 0)))
        .filter(lambda pair, _: pair[1].count() == 2)
        .map(lambda pair, _: pair[0])
        .to_array()
    )


def main():
    a = primes_nested()
    b = primes_chained()
    print("primes =>", b)
    print("same result =>", a == b)   # True

    odd_and_even = init_chain({"from": 1, "to": 25}).group_by(lambda i, _: "even" if i % 2 == 0 else "odd").to_array()
    for key, items in odd_and_even:
        print(key, "=>", items)


if __name__ == "__main__":
    main()
