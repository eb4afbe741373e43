import unittest

from zkcheck.checks.quorum import (
    NodeMode,
    evaluate_liveness,
    evaluate_roles,
)

L = NodeMode.LEADER
F = NodeMode.FOLLOWER
S = NodeMode.STANDALONE
U = NodeMode.UNKNOWN


def _roles(*modes):
    return {f"zk{i}:2181": m for i, m in enumerate(modes)}


class LivenessTests(unittest.TestCase):
    def test_all_imok(self) -> None:
        self.assertTrue(evaluate_liveness({"a:2181": True, "b:2181": True}))

    def test_any_false_fails(self) -> None:
        self.assertFalse(evaluate_liveness({"a:2181": True, "b:2181": False}))

    def test_empty_response_set_is_ok(self) -> None:
        self.assertTrue(evaluate_liveness({}))


class RoleCountingTests(unittest.TestCase):
    def test_one_leader_two_followers(self) -> None:
        self.assertTrue(evaluate_roles(_roles(L, F, F)))

    def test_two_leaders(self) -> None:
        self.assertFalse(evaluate_roles(_roles(L, L, F)))

    def test_no_leader(self) -> None:
        self.assertFalse(evaluate_roles(_roles(F, F, F)))

    def test_single_standalone(self) -> None:
        self.assertTrue(evaluate_roles(_roles(S)))

    def test_standalone_with_follower(self) -> None:
        self.assertFalse(evaluate_roles(_roles(S, F)))

    def test_standalone_skips_leader_rule(self) -> None:
        # the lone standalone node has no leader, but is still fine
        self.assertTrue(evaluate_roles({"only:2181": S}))

    def test_unknown_fails_regardless_of_others(self) -> None:
        self.assertFalse(evaluate_roles(_roles(L, F, U)))
        self.assertFalse(evaluate_roles(_roles(U)))
        self.assertFalse(evaluate_roles(_roles(S, U)))


class NodeModeParseTests(unittest.TestCase):
    def test_known_modes(self) -> None:
        self.assertIs(NodeMode.parse(" leader"), L)
        self.assertIs(NodeMode.parse("Follower\n"), F)
        self.assertIs(NodeMode.parse("standalone"), S)

    def test_unrecognised_modes_are_unknown(self) -> None:
        self.assertIs(NodeMode.parse("observer"), U)
        self.assertIs(NodeMode.parse(""), U)
        self.assertIs(NodeMode.parse(None), U)


if __name__ == "__main__":
    unittest.main()
