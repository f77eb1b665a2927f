from pydantic import BaseModel


class Violation(BaseModel):
    """A single field-level validation failure, as returned in 400 responses."""
    field: str
    message: str
