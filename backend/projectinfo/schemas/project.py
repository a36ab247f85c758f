from pydantic import BaseModel, Field, TypeAdapter, field_validator
from typing import Any, Dict, List, Optional, Union

# Upstream payloads (GitHub REST API)

class UserIdentity(BaseModel):
    name: str = ""
    login: str = ""
    type: str = ""
    message: Optional[str] = None

    @field_validator("name", "login", "type", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        # GitHub sends null for users without a display name
        return "" if value is None else value

    @property
    def is_organization(self) -> bool:
        return self.type.lower() == "organization"

    @property
    def is_not_found(self) -> bool:
        return (self.message or "").lower() == "not found"


class ContributorRecord(BaseModel):
    login: str = ""
    contributions: int = 0

    @field_validator("login", mode="before")
    @classmethod
    def _null_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class ErrorEnvelope(BaseModel):
    """
    Error object GitHub returns in place of the requested resource,
    e.g. {"message": "Not Found", "documentation_url": "..."}.
    """
    message: str
    documentation_url: Optional[str] = None


LanguagePayload = Union[ErrorEnvelope, Dict[str, int]]

_language_map = TypeAdapter(Dict[str, int])
contributor_list = TypeAdapter(List[ContributorRecord])


def parse_language_payload(data: Any) -> LanguagePayload:
    """
    Any object carrying a "message" key is an error envelope, everything
    else must be a mapping of language name to byte count.
    """
    if isinstance(data, dict) and "message" in data:
        return ErrorEnvelope.model_validate(data)
    return _language_map.validate_python(data)


# Service response

class Contributions(BaseModel):
    top_committers: List[str]
    commits: int


class RepositoryInfo(BaseModel):
    project: str = Field(serialization_alias="Project")
    owner: str = Field(serialization_alias="Owner")
    top_committers: List[str] = Field(serialization_alias="TopCommitter")
    commits: int = Field(serialization_alias="Commits")
    languages: List[str] = Field(serialization_alias="Languages")
