"""
Dashboard Content (v1.0.0)
Read-only sample content for the Growth Trail and Subtle Merch Shelf panels.
"""
from dataclasses import dataclass, asdict
from typing import List, Tuple

@dataclass(frozen=True)
class TrailEntry:
    """One reflection on the growth trail."""
    date: str
    title: str
    type: str
    content: str
    tags: Tuple[str, ...]

    def to_dict(self) -> dict:
        data = asdict(self)
        data["tags"] = list(self.tags)
        return data


@dataclass(frozen=True)
class MerchProduct:
    """One product on the merch shelf."""
    id: int
    label: str
    price: str
    imageUrl: str
    hint: str

    def to_dict(self) -> dict:
        return asdict(self)


GROWTH_TRAIL: Tuple[TrailEntry, ...] = (
    TrailEntry(
        date="3 days ago",
        title="Style Insight: Earthy & Grounded",
        type="style",
        content="Uploaded a moodboard of warm landscapes and natural textiles.",
        tags=("Earthy", "Grounded", "Autumnal"),
    ),
    TrailEntry(
        date="1 week ago",
        title="Alignment Score: 82%",
        type="alignment",
        content="Feedback noted a strong connection between your desire for calm and your content's serene aesthetic.",
        tags=("Alignment", "Calm", "Serene"),
    ),
    TrailEntry(
        date="2 weeks ago",
        title="Compass Reading: Playful & Bright",
        type="compass",
        content="Suggested theme 'Dopamine Dressing' for Instagram to match a vibrant, energetic mood.",
        tags=("Compass", "Playful", "Bright"),
    ),
    TrailEntry(
        date="1 month ago",
        title="Style Insight: Bold & Surreal",
        type="style",
        content="Analyzed an outfit with contrasting colors and architectural shapes.",
        tags=("Bold", "Surreal", "Contrast"),
    ),
)

PLACEHOLDER_IMAGE = "https://placehold.co/400x400.png"

MERCH_SHELF: Tuple[MerchProduct, ...] = (
    MerchProduct(1, "Linen-Blend Blazer", "$129.99", PLACEHOLDER_IMAGE, "linen blazer"),
    MerchProduct(2, "Classic Leather Loafers", "$99.50", PLACEHOLDER_IMAGE, "leather shoes"),
    MerchProduct(3, "High-Waisted Trousers", "$89.00", PLACEHOLDER_IMAGE, "dress pants"),
    MerchProduct(4, "Silk-Cotton Scarf", "$45.00", PLACEHOLDER_IMAGE, "silk scarf"),
    MerchProduct(5, "Minimalist Tote Bag", "$155.00", PLACEHOLDER_IMAGE, "tote bag"),
    MerchProduct(6, "Chunky Knit Sweater", "$110.00", PLACEHOLDER_IMAGE, "knit sweater"),
)


def get_growth_trail() -> List[dict]:
    """Trail entries, newest first."""
    return [entry.to_dict() for entry in GROWTH_TRAIL]


def get_merch_shelf() -> List[dict]:
    return [product.to_dict() for product in MERCH_SHELF]
