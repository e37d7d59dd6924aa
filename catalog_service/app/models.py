from sqlalchemy import Column, Integer, String, Numeric, Float, JSON

from catalog_service.app.database import Base


class Category(Base):
    __tablename__ = "categories"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)


class Product(Base):
    __tablename__ = "products"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    price = Column(Numeric(16, 2), nullable=False)
    status = Column(String(16), nullable=False, default="available", index=True)
    image = Column(String(255))
    types = Column(JSON, nullable=False, default=list)
    sizes = Column(JSON, nullable=False, default=list)
    rating = Column(Float)
    # weak reference: categories may be deleted out from under their products
    category_id = Column(Integer, index=True)
