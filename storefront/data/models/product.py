from sqlalchemy import Column, Integer, String, Text, DateTime, JSON

from storefront.data.database import Base
from storefront.utils.time import utc_now


class ProductModel(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True)
    slug = Column(String, unique=True, index=True)
    name = Column(String, nullable=False)

    price_cents = Column(Integer, nullable=False)
    image = Column(String)
    hover_image = Column(String)
    description = Column(Text)
    features = Column(JSON, nullable=False, default=list)
    category = Column(String, index=True)

    created_at = Column(DateTime, nullable=False, default=utc_now)
