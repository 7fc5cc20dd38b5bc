import copy
import pickle
import unittest

from optionpy import Option, Some, NONE, some, none, from_value, from_nullable, filter_value


class TestConstruction(unittest.TestCase):
    def test_from_value(self):
        o = from_value("Hello")
        self.assertTrue(isinstance(o, Some))
        self.assertIs(o.value, "Hello")
        self.assertIs(from_value(None), NONE)
        self.assertIs(from_nullable(None), NONE)

    def test_falsy_values_are_present(self):
        for v in (0, "", [], False):
            self.assertTrue(from_value(v).is_some())

    def test_none_marker_is_shared(self):
        self.assertIs(none(), NONE)
        self.assertTrue(NONE.is_none())
        self.assertTrue(isinstance(NONE, Option))

    def test_some_rejects_none(self):
        with self.assertRaises(ValueError):
            Some(None)

    def test_some_is_immutable(self):
        s = some(1)
        with self.assertRaises(AttributeError):
            s.value = 2  # type: ignore[misc]

    def test_equality_and_singleton(self):
        self.assertEqual(Some(3), Some(3))
        self.assertNotEqual(Some(3), Some(4))
        self.assertNotEqual(Some(3), NONE)
        self.assertIs(copy.copy(NONE), NONE)
        self.assertIs(copy.deepcopy(NONE), NONE)
        self.assertIs(pickle.loads(pickle.dumps(NONE)), NONE)
        self.assertEqual(pickle.loads(pickle.dumps(Some(5))), Some(5))

    def test_str_and_repr(self):
        self.assertEqual(str(Some("Camera")), "Some(Camera)")
        self.assertEqual(str(Some(10)), "Some(10)")
        self.assertEqual(str(NONE), "None")
        self.assertEqual(repr(NONE), "None")
        self.assertEqual(repr(Some(1)), "Some(value=1)")


class TestScalarCombinators(unittest.TestCase):
    def test_map(self):
        self.assertEqual(Some(10).map(lambda i: i * 2), Some(20))
        self.assertIs(NONE.map(lambda i: i * 2), NONE)

    def test_map_does_not_flatten(self):
        nested = Some(2).map(lambda x: Some(x + 1))
        self.assertEqual(nested, Some(Some(3)))
        self.assertEqual(Some(2).map(lambda x: NONE), Some(NONE))

    def test_map_to_none_collapses(self):
        self.assertIs(Some(1).map(lambda _: None), NONE)

    def test_map_skips_function_on_none(self):
        calls = []
        NONE.map(lambda v: calls.append(v))
        self.assertEqual(calls, [])

    def test_flat_map(self):
        self.assertEqual(Some(2).flat_map(lambda x: Some(x * 3)), Some(6))
        self.assertIs(Some(2).flat_map(lambda x: NONE), NONE)
        self.assertIs(NONE.flat_map(lambda x: Some(x)), NONE)
        with self.assertRaises(TypeError):
            Some(2).flat_map(lambda x: x)

    def test_filter(self):
        s = Some(10)
        self.assertIs(s.filter(lambda n: n == 10), s)
        self.assertIs(s.filter(lambda n: n > 10), NONE)
        self.assertIs(NONE.filter(lambda n: True), NONE)

    def test_filter_value(self):
        self.assertEqual(filter_value(3, lambda n: n < 5), Some(3))
        self.assertIs(filter_value(7, lambda n: n < 5), NONE)
        self.assertIs(filter_value(None, lambda n: True), NONE)

    def test_match(self):
        calls = {"some": 0, "none": 0}

        def on_some(v):
            calls["some"] += 1
            return f"got {v}"

        def on_none():
            calls["none"] += 1
            return "nothing"

        self.assertEqual(Some(1).match(on_some, on_none), "got 1")
        self.assertEqual(calls, {"some": 1, "none": 0})
        self.assertEqual(NONE.match(on_some, on_none), "nothing")
        self.assertEqual(calls, {"some": 1, "none": 1})

    def test_contains(self):
        self.assertTrue(Some("Camera").contains(lambda p: p.startswith("C")))
        self.assertFalse(Some("Camera").contains(lambda p: p == "NAS"))
        self.assertFalse(NONE.contains(lambda p: True))

    def test_for_each(self):
        box = {"n": 0}

        def put(v):
            box["n"] = v

        self.assertIsNone(Some(10).for_each(put))
        self.assertEqual(box["n"], 10)
        NONE.for_each(lambda v: put(99))
        self.assertEqual(box["n"], 10)

    def test_to_list_and_iterable(self):
        self.assertEqual(Some("Camera").to_list(), ["Camera"])
        self.assertEqual(NONE.to_list(), [])
        self.assertEqual(list(Some("Camera").to_iterable()), ["Camera"])
        self.assertEqual(list(NONE.to_iterable()), [])
        self.assertEqual([v for v in Some(1)], [1])

    def test_or_else(self):
        self.assertEqual(Some(1).or_else(Some(2)), Some(1))
        self.assertEqual(NONE.or_else(Some(2)), Some(2))

    def test_tap_returns_self(self):
        seen = []
        s = Some(1)
        self.assertIs(s.tap(seen.append), s)
        self.assertIs(NONE.tap(seen.append), NONE)
        self.assertEqual(seen, [s, NONE])


if __name__ == "__main__":
    unittest.main()
