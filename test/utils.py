"""
Tests for the sentinels and helpers of shellutils.utils.

This module verifies:
- Singleton identity of Unset and Missing.
- Falsy semantics and string representation.
- Rich rendering integration of Missing.
- Copying and pickling preserve identity.
- Finality (types cannot be subclassed).
- coalesce() only replaces Unset.
"""
import copy
import pickle
import unittest
from unittest import TestCase

from rich.console import Console

from shellutils.utils import *


class MissingTest(TestCase):
    """
    Test suite for the `Missing` lookup sentinel.
    """

    def testSingleton(self) -> None:
        self.assertIs(Missing, MissingType())
        self.assertIs(MissingType(), MissingType())

    def testDistinctFromUnset(self) -> None:
        self.assertIsNot(Missing, Unset)
        self.assertNotEqual(Missing, Unset)

    def testFalsy(self) -> None:
        self.assertFalse(bool(Missing))

    def testNotEqualToNoneOrFalse(self) -> None:
        self.assertNotEqual(Missing, None)
        self.assertNotEqual(Missing, False)  # noqa: E712

    def testRepr(self) -> None:
        self.assertEqual(repr(Missing), "Missing")
        self.assertEqual(str(Missing), "Missing")

    def testRichConsolePrint(self) -> None:
        """
        Console.print(...) renders 'Missing' without ANSI when color is disabled.
        """
        console = Console(color_system=None, force_terminal=False)
        with console.capture() as capture:
            console.print(Missing)
        self.assertEqual(capture.get().strip(), "Missing")

    def testCopyDeepcopyPickleKeepIdentity(self) -> None:
        self.assertIs(copy.copy(Missing), Missing)
        self.assertIs(copy.deepcopy(Missing), Missing)
        self.assertIs(pickle.loads(pickle.dumps(Missing)), Missing)

    def testFinalClass(self) -> None:
        with self.assertRaises(TypeError):
            type("MissingType", (MissingType,), {})


class UnsetTest(TestCase):
    """
    Test suite for the `Unset` parameter sentinel and coalesce().
    """

    def testSingletonAndFalsy(self) -> None:
        self.assertIs(Unset, UnsetType())
        self.assertFalse(bool(Unset))
        self.assertEqual(repr(Unset), "Unset")

    def testCopyAndPickleKeepIdentity(self) -> None:
        self.assertIs(copy.deepcopy(Unset), Unset)
        self.assertIs(pickle.loads(pickle.dumps(Unset)), Unset)

    def testFinalClass(self) -> None:
        with self.assertRaises(TypeError):
            type("UnsetType", (UnsetType,), {})

    def testCoalesce(self) -> None:
        self.assertEqual(coalesce(Unset, "fallback"), "fallback")
        self.assertIsNone(coalesce(Unset))
        self.assertIsNone(coalesce(None, "fallback"))
        self.assertEqual(coalesce(0, 1), 0)
        self.assertEqual(coalesce("", "fallback"), "")


if __name__ == '__main__':
    unittest.main()
