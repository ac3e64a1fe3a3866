from typing import List

from structkit.patterns.decorator import (
    BLACK_FRIDAY,
    DELIVERY,
    END_OF_LINE,
    GIFT_WRAP,
    CustomerAccount,
    DecoratedPurchase,
    Purchase,
)


def run(playground: "structkit.core.playground.Playground") -> List[str]:  # noqa: F821
    account = CustomerAccount("Joe")
    account.add_purchase(Purchase(product="Red Hat", price=10))
    account.add_purchase(Purchase(product="Scarf", price=20))
    account.add_purchase(
        DecoratedPurchase(
            Purchase(product="Sunglasses", price=25),
            [GIFT_WRAP, DELIVERY, BLACK_FRIDAY, END_OF_LINE],
        )
    )

    lines = account.statement()
    for purchase in account.purchases:
        count = purchase.discount_count()
        if count:
            lines.append(f"{purchase} has {count} discounts")
        else:
            lines.append(f"{purchase} has no discounts")
    return lines
