from django.conf import settings
from django.core.management.base import BaseCommand, CommandError

from hanoi_api.engine import Board, solve


class Command(BaseCommand):
    help = "Solve a fresh board by playing hints, printing every move and board."

    def add_arguments(self, parser):
        parser.add_argument(
            "--disks",
            type=int,
            default=None,
            help="Number of disks (defaults to HANOI_DEFAULT_DISK_COUNT).",
        )

    def handle(self, *args, **options):
        count = options["disks"]
        if count is None:
            count = settings.HANOI_DEFAULT_DISK_COUNT
        if count < 0:
            raise CommandError("--disks must be non-negative.")

        board = Board(count)
        self.stdout.write(repr(board))
        played = 0
        for move in solve(board):
            played += 1
            self.stdout.write(f"{played:>4}  {move}  {board!r}")
        self.stdout.write(self.style.SUCCESS(f"Solved {count} disks in {played} moves."))
