from pydantic import BaseModel


class DashboardStats(BaseModel):
    """Counts shown on the shop dashboard"""
    total_products: int
    featured_products: int
    ar_products: int
    discounted_products: int
    total_companies: int
    pending_ar_requests: int
    approved_ar_requests: int
    rejected_ar_requests: int
