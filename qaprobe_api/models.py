"""
DTOs for the users API.

Unknown keys in responses are ignored. Create/update responses echo the
request body, so ``name`` is accepted as the first name when
``first_name`` is absent.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass
class User:
    id: Optional[int] = None
    email: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar: Optional[str] = None
    job: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["User"]:
        if data is None:
            return None
        user_id = data.get("id")
        if isinstance(user_id, str) and user_id.isdigit():
            user_id = int(user_id)
        return cls(
            id=user_id,
            email=data.get("email"),
            first_name=data.get("first_name") or data.get("name"),
            last_name=data.get("last_name"),
            avatar=data.get("avatar"),
            job=data.get("job"),
            created_at=data.get("createdAt"),
            updated_at=data.get("updatedAt"),
        )

    @property
    def name(self) -> Optional[str]:
        if self.first_name is None:
            return None
        return f"{self.first_name} {self.last_name}" if self.last_name else self.first_name

    def to_payload(self) -> Dict[str, Any]:
        """Request body: API field names, None values dropped"""
        payload = {
            "id": self.id,
            "email": self.email,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "name": self.name,
            "avatar": self.avatar,
            "job": self.job,
        }
        return {k: v for k, v in payload.items() if v is not None}


@dataclass
class Support:
    url: Optional[str] = None
    text: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional["Support"]:
        if not data:
            return None
        return cls(url=data.get("url"), text=data.get("text"))


@dataclass
class UserListResponse:
    page: Optional[int] = None
    per_page: Optional[int] = None
    total: Optional[int] = None
    total_pages: Optional[int] = None
    data: List[User] = field(default_factory=list)
    support: Optional[Support] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "UserListResponse":
        return cls(
            page=data.get("page"),
            per_page=data.get("per_page"),
            total=data.get("total"),
            total_pages=data.get("total_pages"),
            data=[User.from_dict(u) for u in data.get("data") or []],
            support=Support.from_dict(data.get("support")),
        )
