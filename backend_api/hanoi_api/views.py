from __future__ import annotations

import logging
from typing import Any, Dict

from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response
from rest_framework import status, permissions
from drf_yasg.utils import swagger_auto_schema

from .engine import Board, HanoiError, Move
from .gate import get_board_gate
from .serializers import (
    BoardSerializer,
    MoveSerializer,
    ResetRequestSerializer,
    PlayedHintResponseSerializer,
)

logger = logging.getLogger(__name__)


def _board_payload(board: Board) -> Dict[str, Any]:
    return BoardSerializer(board).data


def _reset_payload(data: Any) -> Dict[str, Any]:
    """Accept a bare JSON integer as well as {"count": n} or an empty body."""
    if isinstance(data, dict):
        return data
    return {"count": data}


# PUBLIC_INTERFACE
@api_view(['GET'])
@permission_classes([permissions.AllowAny])
def health(request):
    """Health check endpoint for the API.

    Returns:
    - 200 OK with {"message": "Server is up!"}
    """
    return Response({"message": "Server is up!"})


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="get_board",
    operation_summary="Get the board",
    operation_description="Returns the three peg stacks, each listed bottom to top.",
    responses={200: BoardSerializer},
    tags=["hanoi"],
)
@swagger_auto_schema(
    method="post",
    operation_id="play_move",
    operation_summary="Play a move",
    operation_description="""
Move the top disk of one peg onto another.

Request body:
- from (string, required): A | B | C
- to (string, required): A | B | C

A move from a peg to itself is accepted and changes nothing.

Response:
- the board after the move, or 400 with {"error": ...} if the move is illegal.
""",
    request_body=MoveSerializer,
    responses={200: BoardSerializer},
    tags=["hanoi"],
)
@swagger_auto_schema(
    method="delete",
    operation_id="reset_board",
    operation_summary="Reset the board",
    operation_description="""
Replace the board with a fresh one, every disk on peg A.

Request body (optional): a JSON integer, or {"count": int}. Without a body the
configured default disk count is used.

Response:
- the new board.
""",
    responses={200: BoardSerializer},
    tags=["hanoi"],
)
@api_view(["GET", "POST", "DELETE"])
@permission_classes([permissions.AllowAny])
def board(request):
    """Read, play on, or reset the shared board."""
    gate = get_board_gate()

    if request.method == "POST":
        serializer = MoveSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        move: Move = serializer.save()
        with gate.session() as current:
            try:
                current.play_with_move(move)
            except HanoiError as e:
                logger.warning("Rejected move %s on %r", move, current)
                return Response({"error": str(e)}, status=status.HTTP_400_BAD_REQUEST)
            data = _board_payload(current)
        return Response(data, status=status.HTTP_200_OK)

    if request.method == "DELETE":
        serializer = ResetRequestSerializer(data=_reset_payload(request.data))
        serializer.is_valid(raise_exception=True)
        count = serializer.validated_data["count"]
        with gate.session(reset_to=count) as current:
            data = _board_payload(current)
        logger.info("Board reset with %d disks", count)
        return Response(data, status=status.HTTP_200_OK)

    with gate.session() as current:
        data = _board_payload(current)
    return Response(data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="get_hint",
    operation_summary="Get the next move",
    operation_description="""
Returns the next move of the shortest solution moving every disk to peg C.

When every disk is already on C the answer is {"from": "C", "to": "C"},
a move that changes nothing.
""",
    responses={200: MoveSerializer},
    tags=["hanoi", "hints"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def hint(request):
    """Provide the next move of the solution for the shared board."""
    with get_board_gate().session() as current:
        move = current.hint_move()
    return Response(MoveSerializer(move).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="play_hint",
    operation_summary="Play the next move",
    operation_description="""
Computes the hint and plays it in one step.

Response:
- pegA, pegB, pegC: the board after the move
- move: the move played, or null if the puzzle was already solved
""",
    responses={200: PlayedHintResponseSerializer},
    tags=["hanoi", "hints"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def play_hint(request):
    """Play the hinted move on the shared board."""
    with get_board_gate().session() as current:
        move = current.play_hint()
        resp = {"a": current.a, "b": current.b, "c": current.c, "move": move}
        data = PlayedHintResponseSerializer(resp).data
    return Response(data, status=status.HTTP_200_OK)
