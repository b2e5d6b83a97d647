from __future__ import annotations


class InvalidReceiptError(ValueError):
    """Raised when a receipt cannot be scored.

    `field` is the dotted wire path of the offending value (e.g. `items.2.price`),
    `reason` a short human-readable explanation.
    """

    def __init__(self, field: str, reason: str):
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")
