from pydantic import BaseModel, ConfigDict, computed_field
from pydantic.alias_generators import to_camel
from enum import Enum
from typing import Any, Optional


class SubscriptionTier(str, Enum):
    FREE = "free"
    BASIC = "basic"
    PREMIUM = "premium"
    ENTERPRISE = "enterprise"


class SubscriptionStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    PENDING = "pending"
    CANCELLED = "cancelled"
    EXPIRED = "expired"


class _CamelModel(BaseModel):
    # stored documents use camelCase keys; python code uses snake_case
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SocialMedia(_CamelModel):
    instagram: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None


class TeamMember(_CamelModel):
    id: str
    name: str
    occupation: Optional[str] = None
    image: Optional[str] = None


class Review(_CamelModel):
    id: str
    rating: float
    comment: Optional[str] = None
    reviewer: Optional[str] = None
    date: Optional[str] = None


class SellerRecord(_CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    id: str
    company_name: Optional[str] = None  # unique when present
    company_size: Optional[str] = None
    mission: Optional[str] = None
    logo: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    rating: Optional[float] = None  # derived from reviews elsewhere
    total_coffees: Optional[int] = None
    member_since: Optional[int] = None
    featured_coffee_id: Optional[str] = None
    unique_slug: Optional[str] = None
    specialties: list[str] = []
    certifications: list[str] = []
    social_media: Optional[SocialMedia] = None
    team_members: list[TeamMember] = []
    reviews: list[Review] = []
    subscription_tier: Optional[SubscriptionTier] = None
    subscription_status: Optional[SubscriptionStatus] = None
    subscription_expiry: Optional[str] = None
    monthly_revenue: Optional[float] = None
    total_revenue: Optional[float] = None
    customer_count: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def to_document(self) -> dict[str, Any]:
        """JSON-ready camelCase dict holding only the keys this record carries."""
        data = self.model_dump(mode="json", by_alias=True, exclude_unset=True)
        for key, value in (self.model_extra or {}).items():
            data.setdefault(key, value)
        return data


class SellerProfileUpdate(_CamelModel):
    """
    Shallow patch for a seller record.

    Only the keys the caller actually sent take part in the merge; a nested
    object that is sent (e.g. socialMedia) replaces the stored one wholesale.
    """

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="allow"
    )

    id: Optional[str] = None  # accepted, always overridden by the lookup key
    company_name: Optional[str] = None
    company_size: Optional[str] = None
    mission: Optional[str] = None
    logo: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    location: Optional[str] = None
    country: Optional[str] = None
    city: Optional[str] = None
    website: Optional[str] = None
    description: Optional[str] = None
    rating: Optional[float] = None
    total_coffees: Optional[int] = None
    member_since: Optional[int] = None
    featured_coffee_id: Optional[str] = None
    unique_slug: Optional[str] = None
    specialties: list[str] = []
    certifications: list[str] = []
    social_media: Optional[SocialMedia] = None
    team_members: list[TeamMember] = []
    reviews: list[Review] = []
    subscription_tier: Optional[SubscriptionTier] = None
    subscription_status: Optional[SubscriptionStatus] = None
    subscription_expiry: Optional[str] = None
    monthly_revenue: Optional[float] = None
    total_revenue: Optional[float] = None
    customer_count: Optional[int] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    def changes(self) -> dict[str, Any]:
        data = self.model_dump(
            mode="json", by_alias=True, include=set(self.model_fields_set)
        )
        data.update(self.model_extra or {})
        # a blank name is treated as "not supplied"
        name = data.get("companyName")
        if name is None or not str(name).strip():
            data.pop("companyName", None)
        return data


# ── Registry health ──────────────────────────────────────────────────────────

class RegistryMode(str, Enum):
    PERSISTENT = "persistent"
    BOOTSTRAPPED = "bootstrapped"
    DEGRADED = "degraded"  # serving seed data, document unreadable


class RegistryStatus(BaseModel):
    mode: RegistryMode
    data_file: str
    record_count: int
    loaded_at: Optional[str] = None
    last_error: Optional[str] = None
    last_write_error: Optional[str] = None

    @computed_field
    @property
    def healthy(self) -> bool:
        return self.mode != RegistryMode.DEGRADED and self.last_write_error is None
