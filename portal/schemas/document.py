"""Document API schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from portal.application.use_cases.documents import DocumentView


class UploaderSummary(BaseModel):
    name: str | None = None


class DocumentResponse(BaseModel):
    """Visible document with uploader name and the caller's canDelete flag."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    type: str | None = None
    size: str | None = None
    content_url: str | None = None
    uploaded_by: str | None = None
    uploaded_by_user: UploaderSummary | None = None
    department: str | None = None
    departments: list[str] = Field(default_factory=list)
    access_level: str | None = None
    access_levels: list[str] = Field(default_factory=list)
    reads: int
    downloads: int
    views: int
    shared: bool
    created_at: datetime
    can_delete: bool = Field(alias="canDelete")

    @classmethod
    def from_view(cls, view: DocumentView) -> "DocumentResponse":
        data = view.document.model_dump(exclude={"uploaded_by_user"})
        return cls(
            **data,
            uploaded_by_user=UploaderSummary(name=view.uploaded_by_name)
            if view.uploaded_by_name is not None
            else None,
            can_delete=view.can_delete,
        )
