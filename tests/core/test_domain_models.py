# tests\core\test_domain_models.py
import uuid

import pytest
from pydantic import ValidationError
from gaudi.core.domain.models import Room

class TestRoomModel:
    def test_valid_room_creation(self, room_dicts):
        """Should successfully create a Room from a dictionary."""
        room = Room.from_dict(room_dicts[0])

        assert room.code == room_dicts[0]["code"]
        assert room.size == 215
        assert room.price == 39

    def test_to_dict_round_trip(self, room_dicts):
        assert Room.from_dict(room_dicts[1]).to_dict() == room_dicts[1]

    def test_code_is_generated(self):
        room = Room(size=10, price=20, longitude=0.0, latitude=0.0)
        assert uuid.UUID(room.code)

    def test_room_missing_required_fields(self):
        """Should raise ValidationError if required fields are missing."""
        with pytest.raises(ValidationError):
            Room(price=10, longitude=0.0, latitude=0.0)

    def test_rooms_compare_by_value(self, room_dicts):
        assert Room(**room_dicts[2]) == Room(**room_dicts[2])
