"""
AR request model with state machine for AR model approval
"""

from sqlmodel import Field, SQLModel
from sqlalchemy import Column, ForeignKey, Integer
from datetime import datetime
from typing import Optional
from enum import Enum


class ARRequestStatus(str, Enum):
    """Status of an AR request"""
    PENDING = "Pending"       # Waiting for review
    APPROVED = "Approved"     # AR model approved for the product
    REJECTED = "Rejected"     # Request declined


# Allowed transitions; Approved and Rejected are terminal
AR_REQUEST_TRANSITIONS = {
    ARRequestStatus.PENDING: {ARRequestStatus.APPROVED, ARRequestStatus.REJECTED},
    ARRequestStatus.APPROVED: set(),
    ARRequestStatus.REJECTED: set(),
}


class ARRequest(SQLModel, table=True):
    """Ticket asking for an AR model for a shop's product"""

    __tablename__ = "ar_requests"

    id: Optional[int] = Field(default=None, primary_key=True)
    product: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("products.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )
    shop: int = Field(
        sa_column=Column(
            Integer,
            ForeignKey("companies.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )
    )

    status: ARRequestStatus = Field(
        default=ARRequestStatus.PENDING,
        index=True,
        description="Current status of the request"
    )

    request_date: datetime = Field(default_factory=datetime.utcnow)
    approved_date: Optional[datetime] = None
    rejected_date: Optional[datetime] = None

    # State machine methods
    def can_transition_to(self, status: ARRequestStatus) -> bool:
        """Check if the request can move to the given status"""
        return status in AR_REQUEST_TRANSITIONS[self.status]

    def transition_to_approved(self):
        """Approve a pending request"""
        if not self.can_transition_to(ARRequestStatus.APPROVED):
            raise ValueError(f"Cannot transition to approved from {self.status.value}")
        self.status = ARRequestStatus.APPROVED
        self.approved_date = datetime.utcnow()

    def transition_to_rejected(self):
        """Reject a pending request"""
        if not self.can_transition_to(ARRequestStatus.REJECTED):
            raise ValueError(f"Cannot transition to rejected from {self.status.value}")
        self.status = ARRequestStatus.REJECTED
        self.rejected_date = datetime.utcnow()

    def transition_to(self, status: ARRequestStatus):
        if status == ARRequestStatus.APPROVED:
            self.transition_to_approved()
        elif status == ARRequestStatus.REJECTED:
            self.transition_to_rejected()
        else:
            raise ValueError(f"Cannot transition to {status.value} from {self.status.value}")
