from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional

from .wallclock import format_wall_clock, parse_wall_clock


@dataclass(frozen=True)
class ExtractedMatch:
    """A date expression found in a piece of text."""
    text: str                           # The matched substring
    start: datetime                     # Wall-clock start instant
    index: int                          # Character offset of the match in the input
    end: Optional[datetime] = None      # Wall-clock end, explicit ranges only
    source: str = ""                    # Recognizer that produced the match ("en" / "ko")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the record stored alongside a note."""
        result = {
            "text": self.text,
            "startDate": format_wall_clock(self.start),
            "index": self.index,
        }
        if self.end is not None:
            result["endDate"] = format_wall_clock(self.end)
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ExtractedMatch":
        end = data.get("endDate")
        return cls(
            text=data["text"],
            start=parse_wall_clock(data["startDate"]),
            index=int(data["index"]),
            end=parse_wall_clock(end) if end else None,
        )
