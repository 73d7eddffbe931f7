from pydantic import BaseModel, Field
from typing import List, Optional


class ReportField(BaseModel):
    name: str
    value: str
    inline: bool = False


class RichReport(BaseModel):
    """
    Platform-neutral rich reply. The chat client decides how it is rendered.
    """
    title: str
    subtitle: str
    fields: List[ReportField] = Field(default_factory=list)
    color: Optional[str] = None  # hex, e.g. "#00ae86"

    def get_field(self, name: str) -> Optional[ReportField]:
        """Returns the first field whose name starts with `name`."""
        return next((f for f in self.fields if f.name.startswith(name)), None)
