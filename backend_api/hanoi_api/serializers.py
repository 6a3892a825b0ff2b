from __future__ import annotations

from typing import Any, Dict

from django.conf import settings
from rest_framework import serializers

from .engine import Move, Peg


PEG_CHOICES = [(peg.value, peg.value) for peg in Peg]


class PegField(serializers.ChoiceField):
    """A peg name on the wire ("A", "B" or "C"), Peg in Python."""

    def __init__(self, **kwargs: Any) -> None:
        kwargs.setdefault("choices", PEG_CHOICES)
        super().__init__(**kwargs)

    def to_internal_value(self, data: Any) -> Peg:
        if isinstance(data, str):
            data = data.strip().upper()
        return Peg(super().to_internal_value(data))

    def to_representation(self, value: Any) -> str:
        return Peg(value).value


# PUBLIC_INTERFACE
class BoardSerializer(serializers.Serializer):
    """The three peg stacks, bottom to top. The disk count is not sent."""

    pegA = serializers.ListField(child=serializers.IntegerField(), source="a", read_only=True)
    pegB = serializers.ListField(child=serializers.IntegerField(), source="b", read_only=True)
    pegC = serializers.ListField(child=serializers.IntegerField(), source="c", read_only=True)


# PUBLIC_INTERFACE
class MoveSerializer(serializers.Serializer):
    """A move as {"from": <peg>, "to": <peg>}.

    "from" is a Python keyword, so the fields are declared as start/end and
    renamed in get_fields().
    """

    start = PegField(source="start")
    end = PegField(source="end")

    def get_fields(self) -> Dict[str, serializers.Field]:
        fields = super().get_fields()
        fields["from"] = fields.pop("start")
        fields["to"] = fields.pop("end")
        return fields

    def create(self, validated_data: Dict[str, Any]) -> Move:
        return Move(validated_data["start"], validated_data["end"])


# PUBLIC_INTERFACE
class ResetRequestSerializer(serializers.Serializer):
    """Request payload to reset the board.

    Fields:
    - count (optional): number of disks; defaults to HANOI_DEFAULT_DISK_COUNT
    """

    count = serializers.IntegerField(required=False, min_value=0)

    def validate_count(self, value: int) -> int:
        limit = settings.HANOI_MAX_DISK_COUNT
        if value > limit:
            raise serializers.ValidationError(f"Disk count must be at most {limit}.")
        return value

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        attrs.setdefault("count", settings.HANOI_DEFAULT_DISK_COUNT)
        return attrs


# PUBLIC_INTERFACE
class PlayedHintResponseSerializer(BoardSerializer):
    """Board after an auto-played hint, plus the move played (null if solved)."""

    move = MoveSerializer(allow_null=True, read_only=True)
