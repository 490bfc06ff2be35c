"""Example: scripted news agency run (subscribe, publish, unsubscribe, publish)."""

from dotenv import load_dotenv

from newsagency import EmailSubscriber, MobileAppSubscriber, NewsAgency, Priority, config
from newsagency.console import emit

BANNER_WIDTH = 80


def build_subscribers() -> dict:
    """The four scenario subscribers keyed by first name."""
    return {
        "alice": EmailSubscriber(
            "Alice Johnson", "alice@example.com",
            {"politics", "technology"}, Priority.NORMAL,
        ),
        "bob": MobileAppSubscriber("user_789", "abc123xyz789"),
        "carol": EmailSubscriber(
            "Carol Davis", "carol@work.com",
            {"sports"}, Priority.NORMAL,
        ),
        "dave": MobileAppSubscriber("user_456", "def456uvw123", {"technology"}),
    }


def _banner(title: str) -> None:
    emit()
    emit("=" * BANNER_WIDTH)
    emit(title)
    emit("=" * BANNER_WIDTH)


def run(agency: NewsAgency, subscribers: dict) -> int:
    """Run the fixed sequence against agency; returns the final subscriber count."""
    for subscriber in subscribers.values():
        agency.subscribe(subscriber)

    _banner("BREAKING NEWS")
    agency.publish(
        "Major Earthquake Hits Pacific Coast",
        "A 7.8 magnitude earthquake struck at 14:32 local time...",
        "breaking", Priority.BREAKING,
    )

    _banner("SPORTS NEWS")
    agency.publish(
        "National Team Wins Championship!",
        "Historic victory after 20 years.",
        "sports", Priority.NORMAL,
    )

    emit()
    emit("Bob unsubscribes...")
    agency.unsubscribe(subscribers["bob"])

    _banner("TECHNOLOGY NEWS")
    agency.publish(
        "Quantum Computing Breakthrough Achieved",
        "Scientists successfully demonstrate stable 100-qubit system.",
        "technology", Priority.URGENT,
    )

    count = agency.subscriber_count
    emit(f"Active subscribers: {count}")
    return count


def main() -> None:
    load_dotenv()
    run(NewsAgency(config.agency_name()), build_subscribers())


if __name__ == "__main__":
    main()
