"""Seed data for the in-memory repositories."""

from datetime import UTC, datetime

from pix_node.domain.models import (
    ClientProfile,
    PhotographerListing,
    PhotographerProfile,
    PortfolioItem,
    SocialLinks,
    User,
    UserRole,
)

_JOINED = datetime(2025, 1, 1, tzinfo=UTC)

DEMO_PHOTOGRAPHER = User(
    id="user-1",
    email="john.doe@example.com",
    name="John Doe",
    role=UserRole.PHOTOGRAPHER,
    created_at=_JOINED,
    updated_at=_JOINED,
)

DEMO_CLIENT = User(
    id="user-2",
    email="jane.smith@example.com",
    name="Jane Smith",
    role=UserRole.CLIENT,
    created_at=_JOINED,
    updated_at=_JOINED,
)


def seed_users() -> list[User]:
    return [DEMO_PHOTOGRAPHER, DEMO_CLIENT]


def seed_photographer_profiles() -> list[PhotographerProfile]:
    return [
        PhotographerProfile(
            user_id=DEMO_PHOTOGRAPHER.id,
            bio=(
                "Professional photographer with 5 years of experience "
                "specializing in portraits and events. I focus on natural light "
                "photography and candid moments."
            ),
            specialties=["Portrait", "Event", "Wedding"],
            years_of_experience=5,
            hourly_rate=100,
            location="New York, NY",
            available=True,
            website="https://johndoephotography.example.com",
            social_links=SocialLinks(
                instagram="johndoephoto",
                facebook="johndoephotography",
                twitter="johndoephoto",
                linkedin="johndoe",
            ),
        )
    ]


def seed_client_profiles() -> list[ClientProfile]:
    return [
        ClientProfile(
            user_id=DEMO_CLIENT.id,
            company_name="Smith Creative Agency",
            industry="Advertising",
            description=(
                "Creative agency specializing in brand identity and marketing "
                "campaigns. We work with businesses of all sizes to create "
                "compelling visual narratives."
            ),
            location="Los Angeles, CA",
            website="https://smithcreative.example.com",
        )
    ]


def seed_portfolio_items() -> list[PortfolioItem]:
    return [
        PortfolioItem(
            id="item-1",
            photographer_id=DEMO_PHOTOGRAPHER.id,
            title="Wedding Shoot",
            description="Smith & Johnson Wedding",
            image_url="https://example.com/wedding.jpg",
            tags=["wedding", "outdoor"],
            date=datetime(2025, 1, 15, tzinfo=UTC),
            featured=True,
        ),
        PortfolioItem(
            id="item-2",
            photographer_id=DEMO_PHOTOGRAPHER.id,
            title="Corporate Headshots",
            description="Acme Inc Team Photos",
            image_url="https://example.com/corporate.jpg",
            tags=["corporate", "studio", "headshot"],
            date=datetime(2025, 2, 20, tzinfo=UTC),
        ),
        PortfolioItem(
            id="item-3",
            photographer_id=DEMO_PHOTOGRAPHER.id,
            title="Fashion Editorial",
            description="Summer Collection",
            image_url="https://example.com/fashion.jpg",
            tags=["fashion", "editorial", "summer"],
            date=datetime(2025, 3, 10, tzinfo=UTC),
            featured=True,
        ),
    ]


_LISTING_IMAGE = "https://images.unsplash.com/{}?auto=format&fit=crop&w=300&q=80"


def seed_listings() -> list[PhotographerListing]:
    rows = [
        (
            "1",
            "Alex Morgan",
            "New York, NY",
            ["Weddings", "Portraits", "Events"],
            "$200/hr",
            "Professional photographer with 10+ years of experience "
            "specializing in wedding photography.",
            "photo-1566492031773-4f4e44671857",
        ),
        (
            "2",
            "Jamie Chen",
            "Los Angeles, CA",
            ["Fashion", "Commercial", "Portraits"],
            "$250/hr",
            "Fashion photographer who has worked with major brands and publications.",
            "photo-1621786030888-6a6bfda446e8",
        ),
        (
            "3",
            "Taylor Smith",
            "Chicago, IL",
            ["Nature", "Architecture", "Fine Art"],
            "$175/hr",
            "Award-winning photographer focusing on urban landscapes and "
            "architectural photography.",
            "photo-1542709111240-30727348e2e7",
        ),
        (
            "4",
            "Jordan Patel",
            "Miami, FL",
            ["Events", "Lifestyle", "Travel"],
            "$225/hr",
            "Lifestyle and travel photographer who captures authentic moments "
            "around the world.",
            "photo-1557862921-37829c790f19",
        ),
        (
            "5",
            "Casey Williams",
            "Austin, TX",
            ["Portraits", "Family", "Weddings"],
            "$190/hr",
            "Photographer specializing in family portraits and special life moments.",
            "photo-1589483232748-537611618143",
        ),
        (
            "6",
            "Riley Johnson",
            "Seattle, WA",
            ["Nature", "Wildlife", "Landscapes"],
            "$210/hr",
            "Nature and wildlife photographer with a passion for environmental "
            "conservation.",
            "photo-1560250097-0b93528c311a",
        ),
    ]
    return [
        PhotographerListing(
            id=listing_id,
            name=name,
            location=location,
            specialties=specialties,
            rate=rate,
            bio=bio,
            image_url=_LISTING_IMAGE.format(image),
        )
        for listing_id, name, location, specialties, rate, bio, image in rows
    ]
