# src/schemas/entities.py
"""
Backend DTOs as consumed by the frontend.
The backend owns these entities; every model tolerates unknown fields and
missing optional ones so a backend change never crashes a page.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import Optional, List, Dict, Any

ROLES = ("student", "employer", "admin")


class _DTO(BaseModel):
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    @model_validator(mode="before")
    @classmethod
    def drop_nulls(cls, data: Any) -> Any:
        # null from the backend means "use the default"
        if isinstance(data, dict):
            return {k: v for k, v in data.items() if v is not None}
        return data


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


class SessionUser(_DTO):
    id: Optional[str] = Field(None, alias="_id")
    email: Optional[str] = None
    role: str
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    companyName: Optional[str] = None

    @property
    def display_name(self) -> str:
        if self.firstName and self.lastName:
            return f"{self.firstName} {self.lastName}"
        return self.companyName or self.email or "User"


class Skill(_DTO):
    name: Optional[str] = None
    level: Optional[str] = None


class Job(_DTO):
    id: Optional[str] = Field(None, alias="_id")
    title: str = ""
    description: str = ""
    status: Optional[str] = None
    jobType: Optional[str] = None
    experienceLevel: Optional[str] = None
    location: Dict[str, Any] = Field(default_factory=dict)
    requiredSkills: List[Skill] = Field(default_factory=list)
    employer: Optional[Dict[str, Any]] = None

    coerce_location = field_validator("location", mode="before")(_as_dict)

    @property
    def is_pending(self) -> bool:
        return self.status == "pending"

    @property
    def location_text(self) -> str:
        parts = [self.location.get("city"), self.location.get("state")]
        return ", ".join(p for p in parts if p)


class Post(_DTO):
    id: Optional[str] = Field(None, alias="_id")
    author: Dict[str, Any] = Field(default_factory=dict)
    content: str = ""
    visibility: Optional[str] = None
    postType: Optional[str] = None
    isHidden: bool = False
    isReported: bool = False
    likes: List[Any] = Field(default_factory=list)
    comments: List[Any] = Field(default_factory=list)
    reports: List[Dict[str, Any]] = Field(default_factory=list)

    coerce_author = field_validator("author", mode="before")(_as_dict)

    @property
    def author_name(self) -> str:
        student = self.author.get("studentProfile") or {}
        if student:
            return f"{student.get('firstName', '')} {student.get('lastName', '')}".strip()
        employer = self.author.get("employerProfile") or {}
        if employer:
            return employer.get("companyName") or ""
        return self.author.get("email") or "Unknown"


class Course(_DTO):
    id: Optional[str] = Field(None, alias="_id")
    title: str = ""
    description: str = ""
    category: Optional[str] = None
    level: Optional[str] = None
    skillsCovered: List[Skill] = Field(default_factory=list)
    duration: Optional[Dict[str, Any]] = None
    modules: List[Dict[str, Any]] = Field(default_factory=list)

    @property
    def total_lessons(self) -> int:
        return sum(len(m.get("lessons") or []) for m in self.modules)

    @property
    def duration_text(self) -> str:
        if not self.duration or self.duration.get("value") is None:
            return ""
        return f"{self.duration.get('value')} {self.duration.get('unit', '')}".strip()


class Enrollment(_DTO):
    id: Optional[str] = Field(None, alias="_id")
    course: Course = Field(default_factory=Course)
    progress: float = 0
    completedLessons: List[Any] = Field(default_factory=list)
    completed: bool = False
    status: Optional[str] = None
    certificate: Optional[Any] = None

    @field_validator("course", mode="before")
    @classmethod
    def coerce_course(cls, value: Any) -> Any:
        # unpopulated reference or a course deleted since enrolling
        if isinstance(value, str):
            return {"_id": value}
        if isinstance(value, (dict, Course)):
            return value
        return {}

    @property
    def is_completed(self) -> bool:
        return self.completed or self.status == "completed"


class StudentProfile(_DTO):
    firstName: Optional[str] = None
    lastName: Optional[str] = None


class Employer(_DTO):
    id: Optional[str] = Field(None, alias="_id")
    email: Optional[str] = None
    employerProfile: Dict[str, Any] = Field(default_factory=dict)

    coerce_profile = field_validator("employerProfile", mode="before")(_as_dict)

    @property
    def is_verified(self) -> bool:
        return bool(self.employerProfile.get("isVerified"))


def item_id(item: Dict[str, Any]) -> Optional[str]:
    """Backend ids come as `_id`; fall back to `id`."""
    if not isinstance(item, dict):
        return None
    raw = item.get("_id") or item.get("id")
    return str(raw) if raw is not None else None
