from src.adapters.postgrest.client import PostgrestClient
from src.adapters.postgrest.repos import PostgrestSummaryRepo

__all__ = ["PostgrestClient", "PostgrestSummaryRepo"]
