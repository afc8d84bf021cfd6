from pydantic import BaseModel, ConfigDict
from typing import Any, Dict


class BaseGolfModel(BaseModel):
    """Shared configuration for golf domain models."""
    model_config = ConfigDict(validate_assignment=True)

    def to_document(self) -> Dict[str, Any]:
        """Serialize to a JSON-ready dict (dates become ISO strings)."""
        return self.model_dump(mode="json")
