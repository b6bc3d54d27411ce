from __future__ import annotations

from typing import Dict, List, Literal

from pydantic import BaseModel, ConfigDict, Field


RecordStatus = Literal["ACTIVE", "INACTIVE"]
AccessLevel = Literal["PUBLIC", "CONFIDENTIAL", "SECRET"]


class SocialMedia(BaseModel):
    twitter: str = ""
    linkedin: str = ""

    model_config = ConfigDict(extra="ignore")


class CompanyRecord(BaseModel):
    """Directory record shape: produced by the CSV importer, handed to the record sink."""

    id: str
    status: RecordStatus = "ACTIVE"
    level: AccessLevel = "PUBLIC"
    last_accessed: str = Field(alias="lastAccessed")
    subject: str
    details: str
    required_clearance: AccessLevel = Field(default="PUBLIC", alias="requiredClearance")
    name: str
    address: str = ""
    zip_code: str = Field(default="", alias="zipCode")
    city: str = ""
    country: str = ""
    logo: str = ""
    images: List[str] = Field(default_factory=list)
    category: List[str] = Field(default_factory=list)
    tags: List[str] = Field(default_factory=list)
    social_media: SocialMedia = Field(default_factory=SocialMedia, alias="socialMedia")
    description: str = ""
    source_found: str = Field(default="Company Website", alias="sourceFound")
    ceo: str = ""
    language: List[str] = Field(default_factory=lambda: ["ENGLISH"])
    tax_id: str = Field(default="", alias="taxId")
    verification_status: Dict[str, str] = Field(default_factory=dict, alias="verificationStatus")

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    def to_payload(self) -> Dict:
        """camelCase dict as consumed by the directory front end."""
        return self.model_dump(by_alias=True)
