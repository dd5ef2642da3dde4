from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass
class FileRecord:
    id: str
    file_name: str

    @classmethod
    def from_json(cls, row: Dict[str, Any]) -> "FileRecord":
        return cls(id=str(row.get("id")), file_name=str(row.get("file_name") or ""))


@dataclass
class EndpointAccess:
    auth_token: str
    files: List[FileRecord] = field(default_factory=list)
