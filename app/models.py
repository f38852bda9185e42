# app/models.py
from pydantic import BaseModel
from typing import Optional

class Product(BaseModel):
    id: str
    name: str
    description: Optional[str] = ""
    price: float
    quantity: int
    category: str
    image: Optional[str] = None
