"""Culture variant information."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


# Culture code of invariant content
INVARIANT_CULTURE = ''


@dataclass(frozen=True)
class PublishedCultureInfo:
    """Name, URL segment and publish date of a node in one culture."""
    culture: str
    name: str
    url_segment: str = ''
    date: Optional[datetime] = None
