from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional


@dataclass
class User:
    id: str
    email: str
    name: str
    avatar: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "User":
        return cls(
            id=str(data["id"]),
            email=data["email"],
            name=data["name"],
            avatar=data.get("avatar"),
        )
