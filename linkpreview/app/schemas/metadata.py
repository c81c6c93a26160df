from pydantic import BaseModel, Field

from linkpreview.app.domain.models import MetadataRecord


class MetadataResponse(BaseModel):
    url: str
    title: str | None = None
    description: str | None = None
    image: str | None = None
    site_name: str | None = None
    favicon: str | None = None
    type: str | None = None

    @classmethod
    def from_record(cls, record: MetadataRecord) -> "MetadataResponse":
        return cls(**record.to_dict())


class PreloadRequest(BaseModel):
    urls: list[str] = Field(default_factory=list)


class PreloadResponse(BaseModel):
    requested: int
