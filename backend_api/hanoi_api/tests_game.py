from django.test import override_settings
from django.urls import reverse
from rest_framework.test import APISimpleTestCase

from hanoi_api.gate import reset_board_gate


class HanoiBoardTests(APISimpleTestCase):
    def setUp(self):
        reset_board_gate(3)

    def test_health(self):
        resp = self.client.get(reverse('Health'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"message": "Server is up!"})

    def test_get_board(self):
        resp = self.client.get(reverse('hanoi-board'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"pegA": [2, 1, 0], "pegB": [], "pegC": []})

    def test_play_legal_move(self):
        resp = self.client.post(reverse('hanoi-board'), {"from": "A", "to": "C"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"pegA": [2, 1], "pegB": [], "pegC": [0]})

    def test_peg_names_are_normalized(self):
        resp = self.client.post(reverse('hanoi-board'), {"from": " a", "to": "b "}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["pegB"], [0])

    def test_illegal_move_rejected(self):
        for _ in range(2):
            resp = self.client.post(reverse('hanoi-board'), {"from": "B", "to": "A"}, format="json")
            self.assertEqual(resp.status_code, 400)
            self.assertIn("error", resp.json())
        board = self.client.get(reverse('hanoi-board')).json()
        self.assertEqual(board, {"pegA": [2, 1, 0], "pegB": [], "pegC": []})

    def test_noop_move_accepted(self):
        resp = self.client.post(reverse('hanoi-board'), {"from": "C", "to": "C"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["pegA"], [2, 1, 0])

    def test_malformed_move(self):
        resp = self.client.post(reverse('hanoi-board'), {"from": "D", "to": "A"}, format="json")
        self.assertEqual(resp.status_code, 400)
        resp = self.client.post(reverse('hanoi-board'), {"from": "A"}, format="json")
        self.assertEqual(resp.status_code, 400)


class HanoiResetTests(APISimpleTestCase):
    def setUp(self):
        reset_board_gate(3)

    def test_reset_with_bare_count(self):
        resp = self.client.delete(reverse('hanoi-board'), 4, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"pegA": [3, 2, 1, 0], "pegB": [], "pegC": []})

    def test_reset_with_count_object(self):
        resp = self.client.delete(reverse('hanoi-board'), {"count": 2}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["pegA"], [1, 0])

    def test_reset_to_zero_has_no_hint(self):
        resp = self.client.delete(reverse('hanoi-board'), 0, format="json")
        self.assertEqual(resp.json(), {"pegA": [], "pegB": [], "pegC": []})
        hint = self.client.get(reverse('hanoi-hint')).json()
        self.assertEqual(hint, {"from": "C", "to": "C"})

    @override_settings(HANOI_DEFAULT_DISK_COUNT=2)
    def test_reset_without_body_uses_default(self):
        self.client.post(reverse('hanoi-board'), {"from": "A", "to": "B"}, format="json")
        resp = self.client.delete(reverse('hanoi-board'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"pegA": [1, 0], "pegB": [], "pegC": []})

    @override_settings(HANOI_MAX_DISK_COUNT=5)
    def test_reset_count_out_of_range(self):
        for count in (6, -1):
            resp = self.client.delete(reverse('hanoi-board'), count, format="json")
            self.assertEqual(resp.status_code, 400)
        board = self.client.get(reverse('hanoi-board')).json()
        self.assertEqual(board["pegA"], [2, 1, 0])


class HanoiHintTests(APISimpleTestCase):
    def setUp(self):
        reset_board_gate(3)

    def test_hint_sequence(self):
        self.assertEqual(self.client.get(reverse('hanoi-hint')).json(), {"from": "A", "to": "C"})
        self.client.post(reverse('hanoi-board'), {"from": "A", "to": "C"}, format="json")
        self.assertEqual(self.client.get(reverse('hanoi-hint')).json(), {"from": "A", "to": "B"})
        self.client.post(reverse('hanoi-board'), {"from": "A", "to": "B"}, format="json")
        self.assertEqual(self.client.get(reverse('hanoi-hint')).json(), {"from": "C", "to": "B"})

    def test_hint_does_not_change_board(self):
        self.client.get(reverse('hanoi-hint'))
        board = self.client.get(reverse('hanoi-board')).json()
        self.assertEqual(board["pegA"], [2, 1, 0])

    def test_play_hints_until_solved(self):
        played = []
        while True:
            resp = self.client.post(reverse('hanoi-hint-play'))
            self.assertEqual(resp.status_code, 200)
            data = resp.json()
            if data["move"] is None:
                break
            played.append(data["move"])
        self.assertEqual(len(played), 7)
        self.assertEqual(played[0], {"from": "A", "to": "C"})
        self.assertEqual(data["pegC"], [2, 1, 0])
        self.assertEqual(self.client.get(reverse('hanoi-hint')).json(), {"from": "C", "to": "C"})
