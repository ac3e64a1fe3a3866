import logging
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from structkit.patterns.adapter import (
    FacebookSharer,
    RedditPoster,
    RedditSharingAdapter,
    Sharer,
    SharerType,
    Sharing,
    SharingError,
    TwitterSharer,
)
from structkit.patterns.bridge import (
    EZMessageSender,
    MessageHandler,
    MessageSender,
    PlainMessageHandler,
    QuickMessageSender,
    SecureMessageHandler,
    SelfDestructingMessageHandler,
    VIPMessageSender,
)
from structkit.patterns.composite import (
    CartPart,
    CompositePart,
    CustomerOrder,
    Directory,
    File,
    FileSystemEntry,
    Part,
)
from structkit.patterns.decorator import (
    BLACK_FRIDAY,
    DELIVERY,
    END_OF_LINE,
    GIFT_WRAP,
    RIBBON,
    CustomerAccount,
    DecoratedPurchase,
    Discount,
    Purchase,
)

MB = 1024 * 1024


def test_composite_part_prices_nested_parts() -> None:
    """Test a composite sums its children, including nested composites."""
    door_window = CompositePart("DoorWindow", Part("Window", 100.50), Part("Switch", 12))
    door = CompositePart("Door", door_window, Part("Loom", 80), Part("Handles", 43.40))

    assert door_window.price == pytest.approx(112.5)
    assert door.price == pytest.approx(235.9)
    assert isinstance(door, CartPart)
    assert isinstance(Part("Hood", 320), CartPart)


def test_customer_order_details() -> None:
    """Test the order total treats parts and composites alike."""
    door_window = CompositePart("DoorWindow", Part("Window", 100.50), Part("Switch", 12))
    order = CustomerOrder("Seyha", [Part("Hood", 320), door_window])

    assert order.total_price == pytest.approx(432.5)
    assert order.details() == "Order for Seyha: Cost: $432.50"


def test_directory_size_and_description() -> None:
    """Test directories aggregate sizes and indent children by depth."""
    music = Directory("Music")
    album = Directory("Album")
    music.add(album)
    album.add(File("one.mp3", 2 * MB)).add(File("two.mp3", MB))

    assert music.size() == 3 * MB
    assert isinstance(album, FileSystemEntry)
    assert music.describe().split("\n") == [
        "[+] Music (3.0MB)",
        "\t[+] Album (3.0MB)",
        "\t\t- one.mp3 (2.0MB)",
        "\t\t- two.mp3 (1.0MB)",
    ]


def test_nesting_propagates_when_populated_directory_is_added() -> None:
    """Test adding a populated directory re-nests all of its descendants."""
    album = Directory("Album")
    track = File("track.mp3", MB)
    album.add(track)
    assert track.nesting_level == 1

    root = Directory("Root")
    root.add(Directory("Nested").add(album))

    assert album.nesting_level == 2
    assert track.nesting_level == 3
    assert str(track) == "\t\t\t- track.mp3 (1.0MB)"


def test_file_rejects_negative_size() -> None:
    """Test File validates its size."""
    with pytest.raises(ValueError):
        File("broken.mp3", -1)


def test_decorated_purchase_applies_modifiers_in_order() -> None:
    """Test extras then discounts yield the stacked price."""
    sunglasses = DecoratedPurchase(
        Purchase(product="Sunglasses", price=25),
        [GIFT_WRAP, DELIVERY, BLACK_FRIDAY, END_OF_LINE],
    )

    assert sunglasses.total_price == pytest.approx(7.68)
    assert sunglasses.description == "Sunglasses + giftwrap + delivery"
    assert sunglasses.discount_count() == 2


def test_modifier_order_is_significant() -> None:
    """Test a discount applied before an extra gives a different price."""
    purchase = Purchase(product="Sunglasses", price=25)
    discount_last = DecoratedPurchase(purchase, [GIFT_WRAP, BLACK_FRIDAY])
    discount_first = DecoratedPurchase(purchase, [BLACK_FRIDAY, GIFT_WRAP])

    assert discount_last.total_price == pytest.approx(21.6)
    assert discount_first.total_price == pytest.approx(22.0)


def test_with_modifier_returns_new_purchase() -> None:
    """Test stacking a modifier leaves the original purchase unchanged."""
    plain = DecoratedPurchase(Purchase(product="Scarf", price=20))
    wrapped = plain.with_modifier(RIBBON)

    assert plain.total_price == 20
    assert wrapped.total_price == 21
    assert wrapped.description == "Scarf + ribbon"
    assert plain.discount_count() == 0


def test_customer_account_statement() -> None:
    """Test the statement lists each purchase and the total due."""
    account = CustomerAccount("Joe")
    account.add_purchase(Purchase(product="Red Hat", price=10))
    account.add_purchase(
        DecoratedPurchase(Purchase(product="Sunglasses", price=25), [GIFT_WRAP])
    )

    assert account.total_due() == pytest.approx(37)
    assert account.statement() == [
        "Purchase Red Hat, Price $10.00",
        "Purchase Sunglasses + giftwrap, Price $27.00",
        "Total due: $37.00",
    ]


def test_discount_rate_is_validated() -> None:
    """Test a discount rate above 100% is rejected."""
    with pytest.raises(ValidationError):
        Discount(label="too generous", rate=1.5)


def test_discount_count_includes_discounts_under_extras() -> None:
    """Test discount_count counts every discount, wherever it sits in the list."""
    purchase = Purchase(product="Sunglasses", price=25)

    assert DecoratedPurchase(purchase, [BLACK_FRIDAY, GIFT_WRAP]).discount_count() == 1
    assert DecoratedPurchase(purchase, [GIFT_WRAP]).discount_count() == 0


@pytest.mark.parametrize(
    "handler, expected",
    [
        (PlainMessageHandler(), "Hello"),
        (SecureMessageHandler(), "84a9a0a0a3"),
        (SelfDestructingMessageHandler(), "☠Hello"),
    ],
)
def test_message_handlers_modify_text(handler: MessageHandler, expected: str) -> None:
    """Test each handler's transformation of the message."""
    assert isinstance(handler, MessageHandler)
    assert handler.modify("Hello") == expected


def test_secure_handler_restores_message() -> None:
    """Test scrambled text can be restored with the same key."""
    handler = SecureMessageHandler(key=0x5A)
    assert handler.restore(handler.modify("Grüße")) == "Grüße"
    with pytest.raises(ValueError):
        SecureMessageHandler(key=256)


def test_any_sender_works_with_any_handler() -> None:
    """Test senders own the channel while handlers own the transformation."""
    handler = SelfDestructingMessageHandler()

    assert QuickMessageSender().send(handler, "Hi") == 'Message "☠Hi" sent via e-mail'
    assert VIPMessageSender().send(handler, "Hi") == 'Message "☠Hi" sent via P2P'
    assert EZMessageSender().send(PlainMessageHandler(), "Hi") == 'Message "Hi" sent via P2P'


def test_message_sender_requires_channel() -> None:
    """Test the abstract sender cannot be instantiated."""
    with pytest.raises(TypeError):
        MessageSender()  # type: ignore[abstract]


def test_reddit_adapter_conforms_to_sharing() -> None:
    """Test the adapter turns the callback API into a Sharing call."""
    poster = RedditPoster()
    adapter = RedditSharingAdapter(poster)

    assert isinstance(adapter, Sharing)
    assert not isinstance(poster, Sharing)
    assert adapter.share("hi") == "Message hi posted to Reddit"
    assert poster.posted == ["hi"]
    assert adapter.last_post_id is not None


def test_reddit_adapter_raises_on_failed_post() -> None:
    """Test an error passed to the completion surfaces as SharingError."""
    poster = MagicMock()
    poster.post.side_effect = lambda text, completion: completion(
        RuntimeError("service down"), None
    )

    with pytest.raises(SharingError) as excinfo:
        RedditSharingAdapter(poster).share("hi")
    assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_sharer_routes_by_service_type() -> None:
    """Test share picks one service and rejects unconfigured ones."""
    sharer = Sharer({SharerType.TWITTER: TwitterSharer()})

    assert sharer.share("yo", SharerType.TWITTER) == "Message yo shared on Twitter"
    with pytest.raises(ValueError):
        sharer.share("yo", SharerType.REDDIT)
    assert SharerType.REDDIT.description == "Reddit Poster"
    assert SharerType.FACEBOOK.description == "Facebook Sharer"


def test_share_everywhere_skips_failing_service(
    caplog: pytest.LogCaptureFixture,
) -> None:
    """Test one failing service is logged and the others still share."""
    broken = MagicMock()
    broken.share.side_effect = SharingError("down")
    sharer = Sharer(
        {
            SharerType.FACEBOOK: FacebookSharer(),
            SharerType.REDDIT: broken,
            SharerType.TWITTER: TwitterSharer(),
        }
    )

    with caplog.at_level(logging.ERROR):
        lines = sharer.share_everywhere("hello")

    assert lines == [
        "Message hello shared on Facebook",
        "Message hello shared on Twitter",
    ]
    assert "Reddit Poster" in caplog.text
