from pydantic import field_validator
from typing import Optional, Tuple

from .base import BaseGolfModel

COURSE_NAME_SEPARATOR = " - "
UNKNOWN_CLUB = "Unknown Club"
UNKNOWN_COURSE = "Unknown Course"


def parse_course_name(full_name: Optional[str]) -> Tuple[str, str]:
    """
    Split a stored "Club - Course" name into (club_name, course_name).

    Everything after the first separator belongs to the course name. Without a
    separator both parts are the whole name.
    """
    if not full_name or not full_name.strip():
        return UNKNOWN_CLUB, UNKNOWN_COURSE

    parts = full_name.split(COURSE_NAME_SEPARATOR)
    if len(parts) > 1:
        club_name = parts[0].strip()
        course_name = COURSE_NAME_SEPARATOR.join(parts[1:]).strip()
        return club_name, course_name

    name = full_name.strip()
    return name, name


def format_course_name(club_name: Optional[str], course_name: Optional[str]) -> str:
    """Combine club and course names into the single stored string."""
    if not club_name and not course_name:
        return ""
    if not club_name:
        return course_name
    if not course_name or club_name == course_name:
        return club_name
    return f"{club_name}{COURSE_NAME_SEPARATOR}{course_name}"


class CourseRef(BaseGolfModel):
    """Course metadata embedded in a round fetched from the round store."""

    id: Optional[str] = None
    name: Optional[str] = None
    club_name: Optional[str] = None
    course_name: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None

    @field_validator('id', mode='before')
    @classmethod
    def stringify_id(cls, v):
        if v is None or v == "":
            return None
        return str(v)

    def display_names(self) -> Tuple[str, str]:
        """Return (club_name, course_name), parsing the stored name when needed."""
        if self.club_name or self.course_name:
            club = self.club_name or self.course_name
            course = self.course_name or self.club_name
            return club, course
        return parse_course_name(self.name)
