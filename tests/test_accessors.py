from __future__ import annotations

import importlib.util
import unittest


JAX_AVAILABLE = importlib.util.find_spec("jax") is not None

NON_SEQUENCES = (None, 1, 2.5, "abc", b"abc", {"a": 1}, {1, 2})


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for accessor tests")
class EmptyTests(unittest.TestCase):
    def test_empty_and_non_empty(self) -> None:
        from jonesy import empty

        self.assertTrue(empty([]))
        self.assertTrue(empty(()))
        self.assertFalse(empty([1, 2, 3]))
        self.assertFalse(empty([None]))

    def test_rejects_non_sequences(self) -> None:
        from jonesy import InvalidArgument, empty

        for bad in NON_SEQUENCES:
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidArgument):
                    empty(bad)


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for accessor tests")
class HeadLastTailInitTests(unittest.TestCase):
    def test_head_and_last(self) -> None:
        from jonesy import head, last

        self.assertEqual(head([1, 2, 3]), 1)
        self.assertEqual(last([1, 2, 3]), 3)
        self.assertEqual(head((7,)), 7)
        self.assertEqual(last((7,)), 7)

    def test_tail_and_init(self) -> None:
        from jonesy import init, tail

        self.assertEqual(tail([1, 2, 3]), [2, 3])
        self.assertEqual(tail([1]), [])
        self.assertEqual(init([1, 2, 3]), [1, 2])
        self.assertEqual(init([1]), [])
        self.assertEqual(tail(range(4)), [1, 2, 3])

    def test_empty_input_fails(self) -> None:
        from jonesy import EmptyCollection, head, init, last, tail

        for fn in (head, last, tail, init):
            with self.subTest(fn=fn.__name__):
                with self.assertRaises(EmptyCollection) as ctx:
                    fn([])
                self.assertEqual(ctx.exception.function, fn.__name__)

    def test_non_sequence_input_fails_as_empty_collection(self) -> None:
        from jonesy import EmptyCollection, head, init, last, tail

        for fn in (head, last, tail, init):
            for bad in NON_SEQUENCES:
                with self.subTest(fn=fn.__name__, bad=bad):
                    with self.assertRaises(EmptyCollection):
                        fn(bad)

    def test_slices_are_new_lists(self) -> None:
        from jonesy import init, tail

        t = [1, 2, 3]
        rest = tail(t)
        front = init(t)
        rest.append(99)
        front.append(99)
        self.assertEqual(t, [1, 2, 3])


@unittest.skipUnless(JAX_AVAILABLE, "jax is required for accessor tests")
class InitsTailsTests(unittest.TestCase):
    def test_inits(self) -> None:
        from jonesy import inits

        self.assertEqual(inits([1, 2, 3]), [[1, 2, 3], [1, 2], [1], []])

    def test_tails(self) -> None:
        from jonesy import tails

        self.assertEqual(tails([1, 2, 3]), [[1, 2, 3], [2, 3], [3], []])

    def test_empty_input_gives_singleton_of_empty(self) -> None:
        from jonesy import inits, tails

        self.assertEqual(inits([]), [[]])
        self.assertEqual(tails([]), [[]])

    def test_first_entry_is_a_copy_of_the_input(self) -> None:
        from jonesy import inits, tails

        t = [1, 2]
        for fn in (inits, tails):
            with self.subTest(fn=fn.__name__):
                out = fn(t)
                self.assertEqual(out[0], t)
                self.assertIsNot(out[0], t)

    def test_tuple_input_gives_lists(self) -> None:
        from jonesy import tails

        self.assertEqual(tails((1, 2)), [[1, 2], [2], []])

    def test_rejects_non_sequences(self) -> None:
        from jonesy import InvalidArgument, inits, tails

        for fn in (inits, tails):
            with self.subTest(fn=fn.__name__):
                with self.assertRaises(InvalidArgument):
                    fn(1)


if __name__ == "__main__":
    unittest.main()
