from .user import User, UserRole
from .customer import Customer, CustomerType
from .job import Job, JobStatus
from .quote import Quote, QuoteStatus
from .lead import Lead, LeadStage
from .invoice import Invoice, InvoiceStatus
from .notification import Notification, NotificationType
from .transaction import Transaction, TransactionType

__all__ = [
    "User", "UserRole",
    "Customer", "CustomerType",
    "Job", "JobStatus",
    "Quote", "QuoteStatus",
    "Lead", "LeadStage",
    "Invoice", "InvoiceStatus",
    "Notification", "NotificationType",
    "Transaction", "TransactionType",
]
