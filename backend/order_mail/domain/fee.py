"""
Fee Domain Model

Per-unit split of a fee (e.g. payment processing) between the shipping
and the article cost bucket.
"""
from pydantic import BaseModel, Field, ConfigDict
from decimal import Decimal


class Fee(BaseModel):
    """
    Fee per unit

    Fields:
        ship_fee: Share of the fee carried by shipping, per unit
        article_fee: Share of the fee carried by the article, per unit
    """

    ship_fee: Decimal = Field(Decimal('0'), description="Shipping fee per unit")
    article_fee: Decimal = Field(Decimal('0'), description="Article fee per unit")

    model_config = ConfigDict(frozen=True)

    @property
    def total_per_unit(self) -> Decimal:
        """Shipping plus article fee for one unit"""
        return self.ship_fee + self.article_fee

    def to_dict(self) -> dict:
        """Convert to dictionary with Decimal to float conversion"""
        return {
            'ship_fee': float(self.ship_fee),
            'article_fee': float(self.article_fee),
            'total_per_unit': float(self.total_per_unit),
        }
