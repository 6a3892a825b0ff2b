import threading

from django.test import SimpleTestCase, override_settings

from hanoi_api.gate import BoardGate, get_board_gate, reset_board_gate


class BoardGateTests(SimpleTestCase):
    def test_session_reset_replaces_board(self):
        gate = BoardGate(3)
        with gate.session() as board:
            board.play_hint()
        with gate.session(reset_to=2) as board:
            self.assertEqual(board.a, (1, 0))
            self.assertEqual(board.c, ())

    def test_concurrent_hint_plays_are_serialized(self):
        gate = BoardGate(6)
        played = []

        def worker():
            while True:
                with gate.session() as board:
                    move = board.play_hint()
                    if move is None:
                        return
                    played.append(move)

        threads = [threading.Thread(target=worker) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        self.assertEqual(len(played), 2 ** 6 - 1)
        with gate.session() as board:
            self.assertEqual(board.c, (5, 4, 3, 2, 1, 0))

    @override_settings(HANOI_DEFAULT_DISK_COUNT=4)
    def test_reset_shared_gate_to_default(self):
        board = reset_board_gate()
        self.assertEqual(board.a, (3, 2, 1, 0))
        with get_board_gate().session() as shared:
            self.assertIs(shared, board)
