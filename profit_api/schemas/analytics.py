from pydantic import BaseModel, Field

class AnalyticsSummary(BaseModel):
    total_revenue: str = Field(alias="totalRevenue")  # major units, two decimals
    paying_users: int = Field(alias="payingUsers")
    transactions: int

    class Config:
        populate_by_name = True


class DailyRevenue(BaseModel):
    date: str  # YYYY-MM-DD
    total: str
