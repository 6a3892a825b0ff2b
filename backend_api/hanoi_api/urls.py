from django.urls import path
from .views import (
    health,
    board,
    hint,
    play_hint,
)

urlpatterns = [
    path('health/', health, name='Health'),
    path('hanoi', board, name='hanoi-board'),
    path('hanoi/hint', hint, name='hanoi-hint'),
    path('hanoi/hint/play', play_hint, name='hanoi-hint-play'),
]
