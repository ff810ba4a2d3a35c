# tests/test_vehicle_router.py
"""Unit tests for the vehicle type routes, called directly with a mocked repository."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import json
import pytest
from unittest.mock import MagicMock
from app.models import VehicleType
from app.routers.vehicles import (
    add_vehicle_type, update_vehicle_type, get_all_vehicle_types, get_vehicle_type,
)
from app.schemas.vehicle_type import VehicleTypeIn
from app.utils.exceptions import StorageError


def make_vehicle_type(vehicle_type_id=1, type_name="CAR"):
    return VehicleType(vehicle_type_id=vehicle_type_id, type_name=type_name,
                       description="Passenger cars", is_active=True)


@pytest.fixture
def vehicles():
    return MagicMock()


class TestAddVehicleType:
    def test_valid_input_returns_created_entity(self, vehicles):
        vehicles.add.return_value = make_vehicle_type(vehicle_type_id=5)

        resp = add_vehicle_type(vehicle_type=VehicleTypeIn(type_name="CAR"), vehicles=vehicles)

        assert resp.status_code == 200
        body = json.loads(resp.body)
        assert body["vehicleTypeId"] == 5
        assert body["typeName"] == "CAR"

    def test_null_input_returns_empty_bad_request(self, vehicles):
        resp = add_vehicle_type(vehicle_type=None, vehicles=vehicles)

        assert resp.status_code == 400
        assert resp.body == b""
        vehicles.add.assert_not_called()

    def test_identity_is_zeroed_before_insert(self, vehicles):
        vehicles.add.return_value = make_vehicle_type()

        add_vehicle_type(vehicle_type=VehicleTypeIn(vehicle_type_id=99, type_name="CAR"), vehicles=vehicles)

        assert vehicles.add.call_args[0][0].vehicle_type_id == 0

    def test_nothing_written_returns_null(self, vehicles):
        vehicles.add.return_value = None

        resp = add_vehicle_type(vehicle_type=VehicleTypeIn(type_name="CAR"), vehicles=vehicles)

        assert resp.status_code == 200
        assert json.loads(resp.body) is None

    def test_exception_returns_bad_request_with_message(self, vehicles):
        vehicles.add.side_effect = Exception("Some error message")

        resp = add_vehicle_type(vehicle_type=VehicleTypeIn(type_name="CAR"), vehicles=vehicles)

        assert resp.status_code == 400
        assert resp.body == b"Some error message"

    def test_storage_error_returns_server_error(self, vehicles):
        vehicles.add.side_effect = StorageError("Database error in vehicle_types.add")

        resp = add_vehicle_type(vehicle_type=VehicleTypeIn(type_name="CAR"), vehicles=vehicles)

        assert resp.status_code == 500
        assert resp.body == b"Database error in vehicle_types.add"


class TestUpdateVehicleType:
    def test_valid_data_returns_success(self, vehicles):
        vehicles.update.return_value = True
        body = VehicleTypeIn(vehicle_type_id=1, type_name="CAR", description="SSJSJS", is_active=False)

        resp = update_vehicle_type(1, vehicle_type=body, vehicles=vehicles)

        assert resp.status_code == 200
        assert resp.body == b"Success"
        vehicles.update.assert_called_once_with(1, body)

    def test_mismatched_id_returns_bad_request(self, vehicles):
        vehicles.update.return_value = False
        body = VehicleTypeIn(vehicle_type_id=6, type_name="GHJ", description="SSJSJS", is_active=True)

        resp = update_vehicle_type(1, vehicle_type=body, vehicles=vehicles)

        assert resp.status_code == 400
        assert resp.body == b""

    def test_null_body_returns_bad_request(self, vehicles):
        resp = update_vehicle_type(1, vehicle_type=None, vehicles=vehicles)

        assert resp.status_code == 400
        vehicles.update.assert_not_called()

    def test_exception_returns_bad_request_with_message(self, vehicles):
        vehicles.update.side_effect = Exception("Some error message")

        resp = update_vehicle_type(1, vehicle_type=VehicleTypeIn(vehicle_type_id=1, type_name="CAR"),
                                   vehicles=vehicles)

        assert resp.status_code == 400
        assert resp.body == b"Some error message"


class TestGetAllVehicleTypes:
    def test_returns_full_collection(self, vehicles):
        vehicles.list_all.return_value = [make_vehicle_type(1, "CAR"), make_vehicle_type(2, "TRUCK"),
                                          make_vehicle_type(3, "BIKE")]

        resp = get_all_vehicle_types(vehicles=vehicles)

        assert resp.status_code == 200
        body = json.loads(resp.body)
        assert [v["typeName"] for v in body] == ["CAR", "TRUCK", "BIKE"]

    def test_empty_collection_returns_not_found(self, vehicles):
        vehicles.list_all.return_value = []

        resp = get_all_vehicle_types(vehicles=vehicles)

        assert resp.status_code == 404

    def test_exception_returns_bad_request_with_message(self, vehicles):
        vehicles.list_all.side_effect = Exception("Test Exception")

        resp = get_all_vehicle_types(vehicles=vehicles)

        assert resp.status_code == 400
        assert resp.body == b"Test Exception"


class TestGetVehicleType:
    def test_known_id(self, vehicles):
        vehicles.get_by_id.return_value = make_vehicle_type(3, "BUS")

        resp = get_vehicle_type(3, vehicles=vehicles)

        assert resp.status_code == 200
        assert json.loads(resp.body)["typeName"] == "BUS"

    def test_unknown_id(self, vehicles):
        vehicles.get_by_id.return_value = None

        resp = get_vehicle_type(3, vehicles=vehicles)

        assert resp.status_code == 404
