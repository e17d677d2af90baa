"""Catalog data and query configuration."""

from pathlib import Path

from pydantic import BaseModel, Field

DEFAULT_DATA_PATH = Path(__file__).resolve().parents[2] / "catalog" / "data" / "seed_catalog.json"


class CatalogConfig(BaseModel):
    """Where the catalog comes from and the thresholds its queries use."""

    data_path: Path = Field(
        default=DEFAULT_DATA_PATH,
        description="JSON file holding the products and category tree",
    )
    limited_stock_threshold: int = Field(
        default=10,
        ge=0,
        description="Stock at or below this (while in stock) is reported as limited_stock",
    )
    popular_min_rating: float = Field(
        default=4.0,
        ge=0.0,
        le=5.0,
        description="Default rating floor for popular products",
    )
