# app/schemas/account_schema.py

from datetime import datetime
from fastapi_users import schemas
from typing import Optional
from pydantic import EmailStr, Field, ConfigDict, field_validator, BaseModel

MAX_TAGS = 20


class AccountValidatorsMixin:
    """Mixin class with shared validators for account schemas"""

    @field_validator('name', check_fields=False)
    @classmethod
    def validate_name(cls, v: Optional[str]) -> Optional[str]:
        """Strip the display name and reject blank names"""
        if v is not None:
            v = v.strip()
            if not v:
                raise ValueError('Name cannot be empty or only whitespace')
        return v

    @field_validator('password', check_fields=False)
    @classmethod
    def validate_password(cls, v: Optional[str]) -> Optional[str]:
        """Validate password strength"""
        if v is not None and len(v) < 8:
            raise ValueError('Password must be at least 8 characters long')
        return v

    @field_validator('expertise', 'hobbies', 'adjectives', check_fields=False)
    @classmethod
    def normalize_tags(cls, v: Optional[list[str]]) -> Optional[list[str]]:
        """Trim tags, drop blanks and case-insensitive duplicates, keep order"""
        if v is None:
            return v
        seen = set()
        tags = []
        for tag in v:
            tag = tag.strip()
            if tag and tag.lower() not in seen:
                seen.add(tag.lower())
                tags.append(tag)
        if len(tags) > MAX_TAGS:
            raise ValueError(f'At most {MAX_TAGS} tags are allowed')
        return tags

    @field_validator('social_links', check_fields=False)
    @classmethod
    def validate_social_links(cls, v: Optional[dict[str, str]]) -> Optional[dict[str, str]]:
        """Only http(s) links are stored; empty values are dropped"""
        if v is None:
            return v
        links = {}
        for network, url in v.items():
            url = url.strip()
            if not url:
                continue
            if not url.startswith(('http://', 'https://')):
                raise ValueError(f'Link for {network} must start with http:// or https://')
            links[network.strip().lower()] = url
        return links


class AccountRead(schemas.BaseUser[int]):
    """Schema for reading the full account of the current user"""
    name: str
    position: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    education: Optional[str] = None
    expertise: list[str] = []
    hobbies: list[str] = []
    adjectives: list[str] = []
    social_links: dict[str, str] = {}
    profile_picture_url: Optional[str] = None
    created_at: Optional[datetime] = None


class AccountCreate(AccountValidatorsMixin, schemas.BaseUserCreate):
    """Schema for registration - email, password and display name"""
    email: EmailStr
    password: str
    name: str = Field(..., min_length=1, max_length=255)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "ada@example.com",
                "password": "strongpassword123",
                "name": "Ada Lovelace"
            }
        }
    )


class AccountUpdate(AccountValidatorsMixin, schemas.BaseUserUpdate):
    """Schema for patching the current account profile"""
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    position: Optional[str] = Field(None, max_length=255)
    location: Optional[str] = Field(None, max_length=255)
    bio: Optional[str] = Field(None, max_length=5000)
    education: Optional[str] = Field(None, max_length=500)
    expertise: Optional[list[str]] = None
    hobbies: Optional[list[str]] = None
    adjectives: Optional[list[str]] = None
    social_links: Optional[dict[str, str]] = None
    profile_picture_url: Optional[str] = Field(None, max_length=1000)

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "position": "Founder",
                "location": "Berlin",
                "expertise": ["fundraising", "B2B sales"],
                "social_links": {"linkedin": "https://linkedin.com/in/ada"}
            }
        }
    )


class AccountPublic(BaseModel):
    """Display attributes of an account shown in search results and friend lists"""
    id: int
    name: str
    email: str
    position: Optional[str] = None
    location: Optional[str] = None
    profile_picture_url: Optional[str] = None
    expertise: list[str] = []
    hobbies: list[str] = []

    model_config = ConfigDict(from_attributes=True)


class AccountProfile(AccountPublic):
    """Full public profile of an account"""
    bio: Optional[str] = None
    education: Optional[str] = None
    adjectives: list[str] = []
    social_links: dict[str, str] = {}
    created_at: datetime
