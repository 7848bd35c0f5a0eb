import random
import unittest

import generative as gen

class TestSpecs(unittest.TestCase):
    @gen.forall(trials=200)
    def test_bounded_integer_spec(self, low: int, width: gen.BoundedInteger(0, 1000)):
        arb = gen.BoundedInteger(low, low + width)
        v = arb.get(random.Random(low))
        self.assertGreaterEqual(v, arb.low)
        self.assertLessEqual(v, arb.high)
        for s in arb.shrink(v):
            self.assertGreaterEqual(s, arb.low)
            self.assertLessEqual(s, arb.high)

    @gen.forall(trials=200)
    def test_byte_array_spec(self, data: bytes):
        arb = gen.ByteArray(gen.DEFAULT_MAX_BYTES)
        self.assertTrue(arb.accepts(data))
        for s in arb.shrink(data):
            self.assertLessEqual(len(s), len(data))
            self.assertNotEqual(s, data)

    @gen.forall()
    def test_constant_spec(self, v: int):
        self.assertEqual(gen.Constant(v).get(random.Random(v)), v)
        self.assertEqual(gen.Constant(v).shrink(v), [])

    @gen.forall()
    def test_reversible_map_spec(self, v: gen.BoundedInteger(-100, 100)):
        parent = gen.BoundedInteger(-100, 100)
        tripled = parent.map(lambda x: x * 3, lambda y: y // 3)
        self.assertTrue(tripled.accepts(v * 3))
        self.assertEqual(tripled.shrink(v * 3), [s * 3 for s in parent.shrink(v)])

    @gen.forall()
    def test_list_of_spec(self, length: gen.BoundedInteger(0, 8)):
        arb = gen.ListOf(gen.ByteArray(4), length)
        v = arb.get(random.Random(length))
        self.assertEqual(len(v), length)
        for s in arb.shrink(v):
            self.assertTrue(arb.accepts(s))
