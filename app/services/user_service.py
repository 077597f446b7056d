# app/services/user_service.py
from datetime import datetime

from app.db.actor_store import ActorStore
from app.models.auth import FullName
from app.models.user import User, UserCreate


class UserStore(ActorStore):
    """Rider records in the Users table."""

    table = "Users"
    prefix = "User"
    columns = ["Id", "Email", "FirstName", "LastName", "Created"]

    def to_actor(self, row) -> User:
        return User(
            id=row["UserId"],
            email=row["UserEmail"],
            fullname=FullName(
                firstname=row["UserFirstName"],
                lastname=row["UserLastName"]
            ),
            created_at=datetime.fromisoformat(row["UserCreated"])
        )

    def to_row(self, actor_id: str, payload: UserCreate, password_hash: str, created: str):
        return {
            "UserId": actor_id,
            "UserEmail": payload.email,
            "UserFirstName": payload.fullname.firstname,
            "UserLastName": payload.fullname.lastname,
            "UserPasswordHash": password_hash,
            "UserCreated": created,
        }
