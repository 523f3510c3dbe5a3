"""
Built-in seller dataset.

Produces:
  - 6 sellers used to bootstrap an empty registry and to backfill any of
    these ids missing from the persisted document
  - the default profile given to a seller id seen for the first time

Values are static so the seed is identical across restarts.
"""

from datetime import datetime

from app.models import (
    Review,
    SellerRecord,
    SocialMedia,
    SubscriptionStatus,
    SubscriptionTier,
    TeamMember,
)

_LOGO = "https://images.unsplash.com/photo-1495474472287-4d71bcdd2085?w=400&h=400&fit=crop&crop=center"


def _socials(instagram: str, facebook: str, twitter: str) -> SocialMedia:
    return SocialMedia(instagram=instagram, facebook=facebook, twitter=twitter)


def seed_sellers() -> dict[str, SellerRecord]:
    """Return a fresh copy of the seed dataset keyed by seller id."""
    sellers = [
        SellerRecord(
            id="seller-001",
            company_name="Premium Coffee Co.",
            company_size="25 employees",
            mission="Connecting coffee lovers with exceptional farmers worldwide through transparent, sustainable sourcing.",
            logo=_LOGO,
            phone="+1 (555) 123-4567",
            email="orders@premiumcoffee.com",
            location="Toronto, Canada",
            country="Canada",
            city="Toronto",
            rating=0,
            total_coffees=0,
            member_since=2023,
            specialties=["Single Origin", "Organic", "Fair Trade"],
            featured_coffee_id="",
            description="premium-sourcing",
            website="https://premiumcoffee.com",
            social_media=_socials("@premiumcoffee", "Premium Coffee Co.", "@premiumcoffee"),
            reviews=[],
            team_members=[],
            certifications=["Organic", "Fair Trade", "Direct Trade"],
            unique_slug="premium-coffee-co-001",
            subscription_tier=SubscriptionTier.FREE,
            subscription_status=SubscriptionStatus.ACTIVE,
        ),
        SellerRecord(
            id="seller-002",
            company_name="Liquid Soul Coffee",
            company_size="15 employees",
            mission="Bringing you the finest beans from high-altitude farms with a focus on sustainability.",
            phone="+1 (555) 234-5678",
            email="hello@liquidsoul.com",
            location="Denver, Colorado",
            rating=0,
            total_coffees=0,
            member_since=2022,
            specialties=["High Altitude", "Sustainability", "Small Batch"],
            featured_coffee_id="",
            description="artisan-roasting",
            website="https://liquidsoul.com",
            social_media=_socials("@liquidsoul", "Liquid Soul", "@liquidsoul"),
            reviews=[],
            team_members=[],
            certifications=["Organic", "Rainforest Alliance"],
            unique_slug="liquid-soul-coffee-002",
            subscription_tier=SubscriptionTier.BASIC,
            subscription_status=SubscriptionStatus.ACTIVE,
        ),
        SellerRecord(
            id="seller-003",
            company_name="Basic Coffee Co",
            company_size="8 employees",
            mission="Sourcing exceptional coffees with a commitment to quality and accessibility.",
            phone="+1 (555) 345-6789",
            email="info@basiccoffee.com",
            location="San Francisco, California",
            rating=0,
            total_coffees=0,
            member_since=2021,
            specialties=["Quality", "Accessibility", "Direct Trade"],
            featured_coffee_id="",
            description="quality-focused",
            website="https://basiccoffee.com",
            social_media=_socials("@basiccoffee", "Basic Coffee Co", "@basiccoffee"),
            reviews=[],
            team_members=[],
            certifications=["Organic", "Fair Trade"],
            unique_slug="basic-coffee-co-003",
            subscription_tier=SubscriptionTier.BASIC,
            subscription_status=SubscriptionStatus.ACTIVE,
        ),
        # end-to-end journey seller (premium tier with coffees and a review)
        SellerRecord(
            id="test-seller-001",
            company_name="Test Coffee Company",
            company_size="5 employees",
            mission="Testing the complete seller journey from signup to premium tier with coffee entries.",
            logo=_LOGO,
            phone="+1 (555) 999-8888",
            email="testseller@coffeebreak.com",
            location="Test City, Test Country",
            country="Test Country",
            city="Test City",
            rating=4.7,
            total_coffees=3,
            member_since=2025,
            specialties=["Testing", "Quality Assurance", "System Validation", "Premium Roasting"],
            featured_coffee_id="test-coffee-001",
            description="test-seller-journey",
            website="https://testcoffee.com",
            social_media=_socials("@testcoffee", "Test Coffee Company", "@testcoffee"),
            reviews=[
                Review(
                    id="review-001",
                    rating=5,
                    comment="Excellent test coffee! Perfect for system validation.",
                    reviewer="System Tester",
                    date="2025-01-15T00:00:00+00:00",
                ),
            ],
            team_members=[
                TeamMember(id="member-001", name="Test Roaster", occupation="Quality Assurance Specialist"),
            ],
            certifications=["Test Certified", "Quality Validated", "Premium Roaster"],
            unique_slug="test-seller-user-001",
            subscription_tier=SubscriptionTier.PREMIUM,
            subscription_status=SubscriptionStatus.ACTIVE,
            monthly_revenue=79.99,
            total_revenue=239.97,
            customer_count=12,
            subscription_expiry="2025-12-31",
        ),
        SellerRecord(
            id="seller-004",
            company_name="Monteverde Coffee Estates",
            company_size="30 employees",
            mission="Premium coffee from the finest regions, featuring exceptional quality and unique flavor profiles.",
            phone="+1 (555) 456-7890",
            email="contact@premiumcoffee.com",
            location="Monteverde, Costa Rica",
            rating=0,
            total_coffees=0,
            member_since=2020,
            specialties=["Premium Quality", "Unique Flavors", "Expert Roasting"],
            featured_coffee_id="",
            description="premium-quality",
            website="https://premiumcoffee.com",
            social_media=_socials("@premiumcoffee", "Premium Coffee Co", "@premiumcoffee"),
            reviews=[],
            team_members=[],
            certifications=["Fair Trade", "Direct Trade", "Organic"],
            unique_slug="monteverde-coffee-estates-004",
            subscription_tier=SubscriptionTier.PREMIUM,
            subscription_status=SubscriptionStatus.ACTIVE,
        ),
        SellerRecord(
            id="seller-005",
            company_name="Enterprise Coffee Co",
            company_size="50 employees",
            mission="Leading the coffee industry with innovative solutions and enterprise-grade services.",
            phone="+1 (555) 567-8901",
            email="enterprise@enterprisecoffee.com",
            location="New York, New York",
            rating=0,
            total_coffees=0,
            member_since=2019,
            specialties=["Enterprise Solutions", "Innovation", "Scale"],
            featured_coffee_id="",
            description="enterprise-solutions",
            website="https://enterprisecoffee.com",
            social_media=_socials("@enterprisecoffee", "Enterprise Coffee Co", "@enterprisecoffee"),
            reviews=[],
            team_members=[],
            certifications=["ISO 9001", "Organic", "Fair Trade"],
            unique_slug="enterprise-coffee-co-005",
            subscription_tier=SubscriptionTier.ENTERPRISE,
            subscription_status=SubscriptionStatus.ACTIVE,
        ),
    ]
    return {s.id: s for s in sellers}


def default_profile(seller_id: str, now: datetime) -> SellerRecord:
    """Profile for a seller id that has never been stored before."""
    return SellerRecord(
        id=seller_id,
        # suffixed so two freshly provisioned sellers never share a name
        company_name=f"New Coffee Company {seller_id}",
        company_size="1-5 employees",
        mission="Building our coffee story one bean at a time.",
        phone="",
        email="",
        location="",
        country="",
        city="",
        rating=0,
        total_coffees=0,
        member_since=now.year,
        specialties=[],
        certifications=[],
        reviews=[],
        team_members=[],
        featured_coffee_id="",
        description="new-seller",
        website="",
        social_media=SocialMedia(instagram="", facebook="", twitter=""),
        created_at=now.isoformat(),
    )
