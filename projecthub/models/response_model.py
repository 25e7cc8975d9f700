from dataclasses import dataclass
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


@dataclass
class ApiResponse(Generic[T]):
    """Uniform envelope returned by every mock API call.

    Only ``success=True`` is ever produced here; failures raise instead.
    Callers should still look at ``success`` before trusting ``data``.
    """

    data: T
    success: bool = True
    message: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data = self.data
        if isinstance(data, list):
            data = [_plain(item) for item in data]
        else:
            data = _plain(data)
        out = {"success": self.success, "data": data}
        if self.message is not None:
            out["message"] = self.message
        return out


def _plain(value):
    to_dict = getattr(value, "to_dict", None)
    return to_dict() if callable(to_dict) else value
