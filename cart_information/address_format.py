"""Postal address rendering."""

from .legacy import Address

# Each layout line lists the Address fields printed on it, space separated.
DEFAULT_LAYOUT = (
    ("firstname", "lastname"),
    ("company",),
    ("address1",),
    ("address2",),
    ("postcode", "city"),
    ("state",),
    ("country",),
    ("phone",),
)


class PostalAddressFormatter:
    """Renders an Address as lines joined by a separator, skipping empty lines."""

    def __init__(self, layout=DEFAULT_LAYOUT):
        self.layout = layout

    def generate(self, address: Address, separator: str = "\n") -> str:
        lines = []
        for fields in self.layout:
            parts = [str(getattr(address, name, "") or "").strip() for name in fields]
            line = " ".join(part for part in parts if part)
            if line:
                lines.append(line)
        return separator.join(lines)
