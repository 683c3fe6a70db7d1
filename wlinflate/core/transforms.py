from dataclasses import dataclass
from typing import Optional


SWAP_TOKEN = "{SWAP}"


def parse_csv(value: Optional[str]) -> list[str]:
    """
    Split a comma-separated option into its parts.
    No trimming and no dropping of empty segments: "a,,b," -> ["a", "", "b", ""].
    """
    if value is None:
        return []
    return value.split(",")


@dataclass(frozen=True)
class TransformSet:
    prepend: tuple[str, ...] = ()
    append: tuple[str, ...] = ()
    swap: tuple[str, ...] = ()
    extensions: tuple[str, ...] = ()

    @classmethod
    def from_strings(
        cls,
        prepend: Optional[str] = None,
        append: Optional[str] = None,
        swap: Optional[str] = None,
        extensions: Optional[str] = None,
    ) -> "TransformSet":
        return cls(
            prepend=tuple(parse_csv(prepend)),
            append=tuple(parse_csv(append)),
            swap=tuple(parse_csv(swap)),
            extensions=tuple(parse_csv(extensions)),
        )

    @property
    def multiplier(self) -> int:
        # Swap and combined stages are left out, so this under-counts.
        return 1 + len(self.prepend) + len(self.append) + len(self.extensions)
