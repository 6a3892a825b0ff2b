from io import StringIO

from django.core.management import CommandError, call_command
from django.test import SimpleTestCase, override_settings


class SolveHanoiCommandTests(SimpleTestCase):
    def test_solves_requested_disks(self):
        out = StringIO()
        call_command("solve_hanoi", disks=3, stdout=out)
        output = out.getvalue()
        self.assertIn("A->C", output)
        self.assertIn("Solved 3 disks in 7 moves.", output)

    @override_settings(HANOI_DEFAULT_DISK_COUNT=2)
    def test_default_disk_count(self):
        out = StringIO()
        call_command("solve_hanoi", stdout=out)
        self.assertIn("Solved 2 disks in 3 moves.", out.getvalue())

    def test_zero_disks(self):
        out = StringIO()
        call_command("solve_hanoi", disks=0, stdout=out)
        self.assertIn("Solved 0 disks in 0 moves.", out.getvalue())

    def test_negative_disks(self):
        with self.assertRaises(CommandError):
            call_command("solve_hanoi", disks=-1, stdout=StringIO())
