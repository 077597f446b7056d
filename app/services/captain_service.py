# app/services/captain_service.py
from datetime import datetime

from app.db.actor_store import ActorStore
from app.models.auth import FullName
from app.models.captain import Captain, CaptainCreate, Vehicle


class CaptainStore(ActorStore):
    """Captain (driver) records in the Captains table, vehicle included."""

    table = "Captains"
    prefix = "Captain"
    columns = [
        "Id", "Email", "FirstName", "LastName",
        "VehicleColor", "VehiclePlate", "VehicleCapacity", "VehicleType",
        "Created",
    ]

    def to_actor(self, row) -> Captain:
        return Captain(
            id=row["CaptainId"],
            email=row["CaptainEmail"],
            fullname=FullName(
                firstname=row["CaptainFirstName"],
                lastname=row["CaptainLastName"]
            ),
            vehicle=Vehicle(
                color=row["CaptainVehicleColor"],
                plate=row["CaptainVehiclePlate"],
                capacity=row["CaptainVehicleCapacity"],
                vehicle_type=row["CaptainVehicleType"]
            ),
            created_at=datetime.fromisoformat(row["CaptainCreated"])
        )

    def to_row(self, actor_id: str, payload: CaptainCreate, password_hash: str, created: str):
        vehicle = payload.vehicle
        return {
            "CaptainId": actor_id,
            "CaptainEmail": payload.email,
            "CaptainFirstName": payload.fullname.firstname,
            "CaptainLastName": payload.fullname.lastname,
            "CaptainPasswordHash": password_hash,
            "CaptainVehicleColor": vehicle.color,
            "CaptainVehiclePlate": vehicle.plate,
            "CaptainVehicleCapacity": vehicle.capacity,
            "CaptainVehicleType": vehicle.vehicle_type.value,
            "CaptainCreated": created,
        }
