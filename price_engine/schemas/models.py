from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from typing import List, Optional
from enum import Enum


class Provenance(str, Enum):
    EXTRACTED = "extracted"
    ESTIMATED = "estimated"


class ExtractedPrice(BaseModel):
    """A positive amount in the working currency plus where it came from."""
    model_config = ConfigDict(frozen=True)

    amount: float = Field(gt=0)
    provenance: Provenance = Provenance.EXTRACTED

    @property
    def is_estimated(self) -> bool:
        return self.provenance == Provenance.ESTIMATED


class ProductQuery(BaseModel):
    """Display name plus optional source URL. Seeds estimation."""
    model_config = ConfigDict(frozen=True)

    name: str = Field(min_length=1)
    url: Optional[str] = None

    @field_validator('name')
    def strip_name(cls, v):
        v = v.strip()
        if not v:
            raise ValueError("Product name cannot be empty")
        return v


class ValidationResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    valid: bool
    reason: Optional[str] = None
    suggestion: Optional[float] = None


class Discount(BaseModel):
    model_config = ConfigDict(frozen=True)

    percentage: Optional[int] = Field(default=None, ge=0, le=100)
    amount: Optional[float] = Field(default=None, gt=0)


class PriceRecord(BaseModel):
    """Price information for one platform in one comparison."""
    model_config = ConfigDict(frozen=True)

    platform: str
    product_name: str
    url: Optional[str] = None
    selling_price: ExtractedPrice
    list_price: Optional[ExtractedPrice] = None
    discount_percentage: Optional[int] = Field(default=None, ge=0, le=100)
    discount_amount: Optional[float] = Field(default=None, gt=0)
    availability: str = "Check availability"
    rating: Optional[float] = Field(default=None, ge=0.0, le=5.0)
    review_count: Optional[int] = Field(default=None, ge=0)
    delivery_estimate: Optional[str] = None
    features: List[str] = Field(default_factory=list)

    @model_validator(mode="before")
    @classmethod
    def drop_list_price_below_selling(cls, data):
        # A list price under the selling price is treated as absent
        if isinstance(data, dict):
            selling = data.get("selling_price")
            listed = data.get("list_price")
            if selling is not None and listed is not None:
                selling_amount = selling.amount if isinstance(selling, ExtractedPrice) else selling.get("amount")
                listed_amount = listed.amount if isinstance(listed, ExtractedPrice) else listed.get("amount")
                if listed_amount is not None and selling_amount is not None and listed_amount < selling_amount:
                    data = {**data, "list_price": None}
        return data

    @property
    def is_estimated(self) -> bool:
        return self.selling_price.is_estimated


class ComparisonResult(BaseModel):
    """Ordered price records: the source platform first, never empty."""
    model_config = ConfigDict(frozen=True)

    query: ProductQuery
    product_name: str
    records: List[PriceRecord] = Field(min_length=1)

    @property
    def source(self) -> PriceRecord:
        return self.records[0]

    @property
    def cheapest(self) -> PriceRecord:
        return min(self.records, key=lambda record: record.selling_price.amount)

    @property
    def price_spread(self) -> float:
        amounts = [record.selling_price.amount for record in self.records]
        return max(amounts) - min(amounts)

    @property
    def fully_estimated(self) -> bool:
        return all(record.is_estimated for record in self.records)


class AnalyzeRequest(BaseModel):
    """Request body for the analyze endpoint."""
    query: str = Field(max_length=2048)
