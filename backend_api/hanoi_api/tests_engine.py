import random

from django.test import SimpleTestCase

from hanoi_api.engine import (
    NOOP_MOVE,
    Board,
    BoardCorrupted,
    IllegalMove,
    Move,
    NotRoutable,
    Peg,
    Route,
    is_valid_placement,
    solve,
)
from hanoi_api.engine.pegs import NotA, NotB, NotC

A, B, C = Peg.A, Peg.B, Peg.C


class BoardAssertions:
    def assertBoardInvariants(self, board):
        stacks = board.stacks().values()
        disks = sorted(d for stack in stacks for d in stack)
        self.assertEqual(disks, list(range(board.count)))
        for stack in stacks:
            self.assertTrue(
                all(lower > upper for lower, upper in zip(stack, stack[1:])),
                f"stack out of order: {stack}",
            )


class PegModelTests(SimpleTestCase):
    def test_swap_returns_other_member(self):
        self.assertIs(NotA.B.swap(), NotA.C)
        self.assertIs(NotB.C.swap(), NotB.A)
        self.assertIs(NotC.A.swap(), NotC.B)

    def test_excluded_subset_cannot_name_peg(self):
        for peg in Peg:
            self.assertNotIn(peg.value, [m.value for m in peg.excluded()])

    def test_third_peg(self):
        self.assertIs(A.third(B), C)
        self.assertIs(C.third(A), B)
        with self.assertRaises(NotRoutable):
            A.third(A)

    def test_route_from_move(self):
        route = Route.from_move(Move(A, C))
        self.assertEqual((route.start, route.middle, route.end), (A, B, C))
        self.assertEqual(route.to_move(), Move(A, C))

    def test_degenerate_move_is_not_routable(self):
        for peg in Peg:
            move = Move(peg, peg)
            self.assertTrue(move.is_noop)
            with self.assertRaises(NotRoutable):
                Route.from_move(move)

    def test_route_with_target_from_wrong_subset(self):
        with self.assertRaises(BoardCorrupted):
            Route(A, NotC.A)


class ValidatorTests(SimpleTestCase):
    def test_placement_rules(self):
        self.assertFalse(is_valid_placement(None, None))
        self.assertFalse(is_valid_placement(None, 3))
        self.assertTrue(is_valid_placement(0, None))
        self.assertTrue(is_valid_placement(0, 1))
        self.assertFalse(is_valid_placement(2, 1))


class BoardTests(BoardAssertions, SimpleTestCase):
    def test_new_board(self):
        board = Board(3)
        self.assertEqual(board.a, (2, 1, 0))
        self.assertEqual(board.b, ())
        self.assertEqual(board.c, ())
        self.assertEqual(board.count, 3)

    def test_empty_board_has_no_hint(self):
        board = Board(0)
        self.assertEqual(board.stacks(), {A: (), B: (), C: ()})
        self.assertIsNone(board.hint())
        self.assertEqual(board.hint_move(), NOOP_MOVE)
        self.assertIsNone(board.play_hint())

    def test_negative_count(self):
        with self.assertRaises(ValueError):
            Board(-1)

    def test_play_moves_top_disk(self):
        board = Board(3)
        board.play_with_move(Move(A, C))
        self.assertEqual(board.a, (2, 1))
        self.assertEqual(board.c, (0,))

    def test_move_from_empty_peg_is_illegal(self):
        board = Board(3)
        for _ in range(3):
            with self.assertRaises(IllegalMove):
                board.play_with_move(Move(B, A))
            self.assertEqual(board.stacks(), {A: (2, 1, 0), B: (), C: ()})

    def test_larger_on_smaller_is_illegal(self):
        board = Board(3)
        board.play_with_move(Move(A, C))
        route = Route.from_move(Move(A, C))
        self.assertFalse(board.is_valid(route))
        with self.assertRaises(IllegalMove) as ctx:
            board.play(route)
        self.assertEqual(ctx.exception.move, Move(A, C))
        self.assertEqual(board.stacks(), {A: (2, 1), B: (), C: (0,)})

    def test_noop_move_changes_nothing(self):
        board = Board(2)
        board.play_with_move(Move(B, B))
        board.play_with_move(Move(A, A))
        self.assertEqual(board.stacks(), {A: (1, 0), B: (), C: ()})

    def test_locate(self):
        board = Board(3)
        board.play_with_move(Move(A, B))
        self.assertEqual(board.locate(2), (A, True))
        self.assertEqual(board.locate(1), (A, False))
        self.assertEqual(board.locate(0), (B, False))
        with self.assertRaises(BoardCorrupted):
            board.locate(3)

    def test_random_legal_play_keeps_invariants(self):
        rng = random.Random(1234)
        board = Board(5)
        for _ in range(300):
            move = Move(rng.choice(list(Peg)), rng.choice(list(Peg)))
            before = board.stacks()
            if move.is_noop or board.is_valid(Route.from_move(move)):
                board.play_with_move(move)
            else:
                with self.assertRaises(IllegalMove):
                    board.play_with_move(move)
                self.assertEqual(board.stacks(), before)
            self.assertBoardInvariants(board)


class SolverTests(BoardAssertions, SimpleTestCase):
    def test_three_disk_sequence(self):
        board = Board(3)
        expected = [
            Move(A, C), Move(A, B), Move(C, B), Move(A, C),
            Move(B, A), Move(B, C), Move(A, C),
        ]
        self.assertEqual(board.hint_move(), Move(A, C))
        board.play_with_move(board.hint_move())
        self.assertEqual(board.stacks(), {A: (2, 1), B: (), C: (0,)})
        self.assertEqual(board.hint_move(), Move(A, B))
        board.play_with_move(board.hint_move())
        self.assertEqual(board.hint_move(), Move(C, B))
        self.assertEqual([Move(A, C), Move(A, B)] + list(solve(board)), expected)
        self.assertEqual(board.stacks(), {A: (), B: (), C: (2, 1, 0)})
        self.assertEqual(board.hint_move(), NOOP_MOVE)

    def test_full_solve_is_minimal(self):
        for count in range(0, 8):
            board = Board(count)
            played = 0
            while True:
                move = board.play_hint()
                if move is None:
                    break
                played += 1
                self.assertBoardInvariants(board)
            self.assertEqual(played, 2 ** count - 1)
            self.assertEqual(board.c, tuple(reversed(range(count))))
            self.assertEqual(board.a, ())
            self.assertEqual(board.b, ())

    def test_hint_is_always_legal(self):
        board = Board(4)
        while True:
            route = board.hint()
            if route is None:
                break
            self.assertTrue(board.is_valid(route))
            board.play(route)

    def test_hint_recovers_after_manual_moves(self):
        rng = random.Random(42)
        for _ in range(20):
            board = Board(5)
            for _ in range(rng.randrange(0, 40)):
                move = Move(rng.choice(list(Peg)), rng.choice(list(Peg)))
                if move.is_noop or board.is_valid(Route.from_move(move)):
                    board.play_with_move(move)
            moves = list(solve(board))
            self.assertLessEqual(len(moves), 2 ** 5 - 1)
            self.assertEqual(board.c, (4, 3, 2, 1, 0))
            self.assertBoardInvariants(board)
