from decimal import Decimal
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductStatus(str, Enum):
    available = "available"
    pending = "pending"
    sold = "sold"


class CategoryBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, max_length=255)

class CategoryCreate(CategoryBase):
    pass

class CategoryUpdate(CategoryBase):
    pass

class Category(BaseModel):
    id: int
    name: str

    model_config = ConfigDict(from_attributes=True)


class ProductCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    image: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, max_length=255)
    types: List[str] = Field(..., min_length=1)
    sizes: List[str] = Field(..., min_length=1)
    rating: float = Field(..., ge=1, le=5)
    price: Decimal = Field(..., ge=0, max_digits=16, decimal_places=2)
    status: ProductStatus = Field(default=ProductStatus.available, validate_default=True)
    category_id: Optional[int] = None

    @field_validator("types", "sizes", mode="before")
    @classmethod
    def wrap_single_tag(cls, value):
        # a lone tag is stored as a one-element list
        if isinstance(value, str):
            return [value]
        return value


class ProductUpdate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, use_enum_values=True)

    name: str = Field(..., min_length=1, max_length=255)
    price: Decimal = Field(..., ge=0, max_digits=16, decimal_places=2)
    image: Optional[str] = Field(default=None, min_length=1)
    types: Optional[List[str]] = None
    sizes: Optional[List[str]] = None
    rating: Optional[float] = None
    status: Optional[ProductStatus] = None
    category_id: Optional[int] = None

    @field_validator("types", "sizes", mode="before")
    @classmethod
    def wrap_single_tag(cls, value):
        # a lone tag is stored as a one-element list
        if isinstance(value, str):
            return [value]
        return value


class Product(BaseModel):
    id: int
    name: str
    price: float
    status: ProductStatus
    image: Optional[str] = None
    types: List[str] = []
    sizes: List[str] = []
    rating: Optional[float] = None
    category_id: Optional[int] = None

    model_config = ConfigDict(from_attributes=True)


class ProductCreated(BaseModel):
    success: bool = True
    id: int
    message: str


class Message(BaseModel):
    message: str
