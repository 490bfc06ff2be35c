"""In-process news agency: publish/subscribe with console notifications (no broker)."""

from newsagency.news import News, Priority
from newsagency.subscriber import NewsSubscriber
from newsagency.email_subscriber import EmailSubscriber
from newsagency.mobile_subscriber import MobileAppSubscriber
from newsagency.agency import NewsAgency

__all__ = [
    "News",
    "Priority",
    "NewsSubscriber",
    "EmailSubscriber",
    "MobileAppSubscriber",
    "NewsAgency",
]
