from .repos import CompanyStorePort

__all__ = [
    "CompanyStorePort",
]
