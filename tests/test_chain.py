import unittest

from arrayfns import ChainableArray, chain, init_chain, InitRange, ElementNotFoundError, NonFiniteRangeError


class TestChainableArray(unittest.TestCase):
    def test_iterable_and_sized(self):
        c = chain([1, 2])
        self.assertEqual(list(c), [1, 2])
        self.assertEqual(len(c), 2)
        self.assertEqual(ChainableArray.of(1, 2), c)

    def test_does_not_alias_source(self):
        source = [3, 1, 2]
        c = chain(source)
        source.append(9)
        self.assertEqual(c.sort().to_array(), [1, 2, 3])
        out = c.to_array()
        out.append(7)
        self.assertEqual(c.count(), 3)

    def test_sequence_methods(self):
        c = chain([1, 2, 3, 4]).map(lambda x, _: x * 2).filter(lambda x, i: i > 0)
        self.assertEqual(c.to_array(), [4, 6, 8])
        self.assertEqual(c.append([10]).reverse().to_array(), [10, 8, 6, 4])
        self.assertEqual(c.pairwise().to_array(), [(4, 6), (6, 8)])
        self.assertEqual(chain([1, 2, 3]).choose(lambda x, _: x if x != 2 else None).to_array(), [1, 3])
        self.assertEqual(chain([1, 2]).collect(lambda x, _: [x] * x).to_array(), [1, 2, 2])
        self.assertEqual(chain([1, 1, 2]).distinct().to_array(), [1, 2])
        self.assertEqual(chain(["a", "bb", "cc"]).distinct_by(lambda s, _: len(s)).to_array(), ["a", "bb"])

    def test_ordering_methods(self):
        self.assertEqual(chain(["cat", "amy", "bob"]).sort().to_array(), ["amy", "bob", "cat"])
        self.assertEqual(chain([1, 3, 2]).sort_descending().to_array(), [3, 2, 1])
        self.assertEqual(chain(["bb", "a"]).sort_by(len).to_array(), ["a", "bb"])
        self.assertEqual(chain(["a", "bb"]).sort_by_descending(len).to_array(), ["bb", "a"])

    def test_scalar_methods(self):
        rows = chain([{"name": "amy", "id": 1}, {"name": "bob", "id": 2}])
        self.assertEqual(rows.get(lambda x, _: x["name"] == "bob"), {"name": "bob", "id": 2})
        with self.assertRaises(ElementNotFoundError):
            rows.get(lambda x, _: x["name"] == "cat")
        self.assertIsNone(rows.find(lambda x, _: x["id"] == 5))
        self.assertTrue(rows.exists(lambda x, _: x["id"] == 2))
        self.assertFalse(rows.every(lambda x, _: x["id"] == 2))
        self.assertEqual(rows.length(), 2)
        self.assertEqual(rows.sum_by(lambda x: x["id"]), 3)
        self.assertEqual(rows.max_by(lambda x: x["id"]), 2)
        self.assertEqual(rows.min_by(lambda x: x["id"]), 1)
        self.assertEqual(rows.mean_by(lambda x: x["id"]), 1.5)

    def test_group_by(self):
        groups = init_chain({"from": 1, "to": 5}).group_by(lambda i, _: "even" if i % 2 == 0 else "odd").to_array()
        self.assertEqual(groups, [("odd", [1, 3, 5]), ("even", [2, 4])])


class TestInitChain(unittest.TestCase):
    def test_init_chain(self):
        self.assertEqual(init_chain(InitRange(1, -1, -0.5)).to_array(), [1, 0.5, 0, -0.5, -1])
        self.assertEqual(init_chain(3, lambda i: i + 1).to_array(), [1, 2, 3])
        with self.assertRaises(NonFiniteRangeError):
            init_chain(InitRange(0, 1, -1))

    def test_primes(self):
        primes = (
            init_chain({"from": 1, "to": 30})
            .map(lambda x, _: (x, init_chain({"from": 1, "to": x}).filter(lambda y, _: x % y == 0)))
            .filter(lambda pair, _: pair[1].count() == 2)
            .map(lambda pair, _: pair[0])
            .to_array()
        )
        self.assertEqual(primes, [2, 3, 5, 7, 11, 13, 17, 19, 23, 29])
