from .base import Base, BaseModel, CreatedAt

__all__ = [
    "Base",
    "BaseModel",
    "CreatedAt",
]
